"""Layout listing pages, heatmap data and tool links."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

LAYOUTS_PER_PAGE = 12


@dataclass(frozen=True)
class HeatmapData:
    """Per-corpus key usage frequencies."""

    corpora: Mapping[str, Mapping[str, float]] = field(default_factory=dict)

    def get(self, corpus: str, char: str) -> float | None:
        """Return the frequency of ``char`` in ``corpus``, or None if unknown."""
        data = self.corpora.get(corpus)
        if data is None:
            return None
        return data.get(char)

    @classmethod
    def from_json(cls, text: str) -> HeatmapData:
        """Parse a JSON object mapping corpus names to char frequencies."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid heatmap data: {exc}") from exc
        if not isinstance(raw, dict):
            raise ValueError("heatmap data must be a JSON object")

        corpora: dict[str, dict[str, float]] = {}
        for corpus, freqs in raw.items():
            if not isinstance(freqs, dict):
                raise ValueError(f"frequencies of {corpus!r} must be an object")
            parsed: dict[str, float] = {}
            for char, value in freqs.items():
                if len(char) != 1:
                    raise ValueError(f"expected a single character, got {char!r}")
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"frequency of {char!r} must be a number")
                parsed[char] = float(value)
            corpora[corpus] = parsed
        return cls(corpora)


@dataclass(frozen=True)
class Paginator:
    """Splits layout names into pages."""

    names: Sequence[str]
    per_page: int = LAYOUTS_PER_PAGE

    @property
    def max_pages(self) -> int:
        """Index of the last page that the next button may reach."""
        return len(self.names) // self.per_page

    def page(self, index: int) -> list[str]:
        """Return the names shown on page ``index``."""
        start = index * self.per_page
        return list(self.names[start : start + self.per_page])

    def has_prev(self, index: int) -> bool:
        return index > 0

    def has_next(self, index: int) -> bool:
        return index < self.max_pages


def tool_slug(name: str) -> str:
    """Return the URL path segment of a tool's display name."""
    return name.lower().replace(" ", "-")