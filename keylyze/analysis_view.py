"""State and layout helpers behind the interactive layout analysis view."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from keylyze.geometry import PhysicalKey, minmax_x, minmax_y

T = TypeVar("T")

_VIEW_WIDTH = 100.0
_KEY_GAP = 0.2


def format_stat(value: float, unit: str) -> str:
    """Format a statistic to three decimals, trimming trailing zeros and dot."""
    return f"{value:.3f}{unit}".rstrip("0").rstrip(".")


def swap_keys(keys: Sequence[T], a: int, b: int) -> list[T]:
    """Return a copy of ``keys`` with the entries at ``a`` and ``b`` exchanged."""
    swapped = list(keys)
    swapped[a], swapped[b] = swapped[b], swapped[a]
    return swapped


def layout_key_boxes(keys: Sequence[PhysicalKey]) -> list[PhysicalKey]:
    """Map physical keys onto boxes measured in percent of the rendered board.

    Each box leaves a small gap around its key. Raises ValueError when the
    keys span no width or no height.
    """
    if not keys:
        return []

    lx, hx = minmax_x(keys)
    ly, hy = minmax_y(keys)
    dx, dy = hx - lx, hy - ly
    if dx == 0 or dy == 0:
        raise ValueError("keys must span a non-zero width and height")

    kw = _VIEW_WIDTH / dx
    ym = dx / dy

    return [
        PhysicalKey(
            x=(key.x - lx) * kw + _KEY_GAP,
            y=(key.y - ly) * kw * ym + _KEY_GAP * ym,
            width=key.width * kw - 2 * _KEY_GAP,
            height=(key.height * kw - 2 * _KEY_GAP) * ym,
        )
        for key in keys
    ]


@dataclass
class Pins:
    """Key positions that stay fixed while generating layouts."""

    positions: set[int] = field(default_factory=set)

    def toggle(self, index: int) -> bool:
        """Pin ``index`` if it is free, unpin it otherwise; return whether it is pinned."""
        if index in self.positions:
            self.positions.remove(index)
            return False
        self.positions.add(index)
        return True

    def __contains__(self, index: object) -> bool:
        return index in self.positions

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.positions))

    def __len__(self) -> int:
        return len(self.positions)