"""Text reports printed by the interactive analyzer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, fields
from enum import Enum

DEFAULT_COUNT = 10

_TRIGRAM_LABELS = {
    "sft": "Sft:",
    "sfb": "Sfb:",
    "inroll": "Inroll:",
    "outroll": "Outroll:",
    "alternate": "Alternate:",
    "redirect": "Redirect:",
    "onehandin": "Onehand In:",
    "onehandout": "Onehand Out:",
    "thumb": "Thumb:",
    "invalid": "Invalid:",
}


class ReplStatus(Enum):
    """What the analyzer loop does after handling a line."""

    CONTINUE = "continue"
    QUIT = "quit"


class UnknownLayoutError(LookupError):
    """Raised when a layout name is not among the loaded layouts."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return (
            f"Layout '{self.name}' not found. "
            "It might exist, but it's not currently loaded."
        )


@dataclass(frozen=True)
class TrigramStats:
    """Percentages of each trigram category of a layout."""

    sft: float = 0.0
    sfb: float = 0.0
    inroll: float = 0.0
    outroll: float = 0.0
    alternate: float = 0.0
    redirect: float = 0.0
    onehandin: float = 0.0
    onehandout: float = 0.0
    thumb: float = 0.0
    invalid: float = 0.0


def pin_positions(keys: Sequence[str], pin_chars: str) -> list[int]:
    """Return the key positions holding any of ``pin_chars``.

    A single one-byte character pins only its first occurrence; longer
    input pins every position whose key is among the characters.
    """
    size = len(pin_chars.encode("utf-8"))
    if size == 0:
        return []
    if size == 1:
        try:
            return [list(keys).index(pin_chars)]
        except ValueError:
            return []
    wanted = set(pin_chars)
    return [i for i, key in enumerate(keys) if key in wanted]


def format_trigrams(stats: TrigramStats) -> list[str]:
    """Return one line per non-zero trigram statistic, in a fixed order."""
    lines = []
    for f in fields(stats):
        value = getattr(stats, f.name)
        if value != 0.0:
            lines.append(f"{_TRIGRAM_LABELS[f.name]:<14}{value:.3f}%")
    return lines


def rank_lines(scores: Mapping[str, int]) -> list[str]:
    """Return ``name score`` lines ordered from lowest to highest score."""
    ranked = sorted(scores.items(), key=lambda item: item[1])
    return [f"{name:<15} {score}" for name, score in ranked]


def format_finger_values(values: Iterable[float]) -> str:
    """Join per-finger values with two decimals each."""
    return ", ".join(f"{float(v):.2f}" for v in values)