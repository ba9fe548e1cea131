"""Collapsible metadata panel shown beneath an analyzed layout."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

UNKNOWN = "Unknown"
COLLAPSED_ICON = "𝅉"
EXPANDED_ICON = "𝅏"

_LABELS = ("Name", "Authors", "Year", "Description", "Source", "Languages")


@dataclass
class MetadataPanel:
    """Layout metadata rows that can be expanded to list missing entries.

    While collapsed, only known entries are shown. Expanding fills every
    missing entry with ``"Unknown"``; collapsing again hides those.
    """

    name: str
    authors: Sequence[str] | None = None
    description: str | None = None
    year: int | None = None
    languages: Sequence[tuple[str, object]] = ()
    link: str | None = None
    collapsed: bool = field(default=True, init=False)
    info: str = field(default=COLLAPSED_ICON, init=False)
    _values: dict[str, str | None] = field(init=False, repr=False)
    _link_unknown: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self._values = {
            "Name": self.name,
            "Authors": None if self.authors is None else ", ".join(self.authors),
            "Description": self.description,
            "Year": None if self.year is None else str(self.year),
            "Languages": ", ".join(
                f"{language}: {weight}" for language, weight in self.languages
            ),
        }

    def toggle(self) -> bool:
        """Switch between collapsed and expanded; return whether now collapsed."""
        if self.collapsed:
            self.info = EXPANDED_ICON
            self._link_unknown = self.link is None
            for label, value in self._values.items():
                if value is None:
                    self._values[label] = UNKNOWN
        else:
            self.info = COLLAPSED_ICON
            self._link_unknown = False
            for label, value in self._values.items():
                if value == UNKNOWN:
                    self._values[label] = None
        self.collapsed = not self.collapsed
        return self.collapsed

    def rows(self) -> list[tuple[str, str]]:
        """Return the ``(label, value)`` rows currently shown, in display order."""
        shown = []
        for label in _LABELS:
            if label == "Source":
                value = UNKNOWN if self._link_unknown else self.link
            else:
                value = self._values[label]
            if value is not None:
                shown.append((label, value))
        return shown