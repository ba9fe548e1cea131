"""Settings for turning text files into corpus data."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CorpusInput:
    """A named text to take frequencies from."""

    name: str
    text: str


@dataclass
class CorpusDataSettings:
    """Which characters are kept when cleaning a corpus."""

    chars: str = "abcdefghijklmnopqrstuvwxyz"
    char_mappings: list[tuple[str, str]] = field(default_factory=list)
    uppercase_mappings: list[tuple[str, str]] = field(default_factory=list)
    multi_mappings: list[tuple[str, str]] = field(default_factory=list)
    dead_key_mappings: list[tuple[str, list[tuple[str, str]]]] = field(
        default_factory=list
    )
    include_space: bool = True
    include_tab: bool = False
    include_enter: bool = False
    enable_repeat_key: bool = False
    shift_char: str | None = None
    uppercase_qwerty_punctuation: bool = True
    normalize_misc_punctuation: bool = False

    def special_chars(self) -> str:
        """Whitespace characters to keep: space, tab and newline as enabled."""
        enabled = (
            (self.include_space, " "),
            (self.include_tab, "\t"),
            (self.include_enter, "\n"),
        )
        return "".join(char for on, char in enabled if on)

    def cleaner_chars(self) -> str:
        """Every character the cleaner keeps, letters first."""
        return self.chars + self.special_chars()


def apply_chars_edit(current: str, new_value: str) -> str:
    """Apply an edit of the characters box to ``current``.

    Growing input appends its last character; anything else removes the
    last character of ``current``.
    """
    if len(new_value.encode("utf-8")) > len(current.encode("utf-8")):
        return current + new_value[-1]
    return current[:-1]


def total_bytes(inputs: Iterable[CorpusInput]) -> int:
    """Return the UTF-8 size of all input texts together."""
    return sum(len(item.text.encode("utf-8")) for item in inputs)