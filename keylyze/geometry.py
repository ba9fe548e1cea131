"""Physical key positions and layout bounds."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalKey:
    """A rectangular key on a physical keyboard."""

    x: float
    y: float
    width: float = 1.0
    height: float = 1.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def minmax_x(keys: Iterable[PhysicalKey]) -> tuple[float, float]:
    """Return the leftmost and rightmost horizontal extent of the keys."""
    keys = list(keys)
    return (
        min((k.x for k in keys), default=0.0),
        max((k.right for k in keys), default=0.0),
    )


def minmax_y(keys: Iterable[PhysicalKey]) -> tuple[float, float]:
    """Return the topmost and bottommost vertical extent of the keys."""
    keys = list(keys)
    return (
        min((k.y for k in keys), default=0.0),
        max((k.bottom for k in keys), default=0.0),
    )