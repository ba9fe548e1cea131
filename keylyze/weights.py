"""Scoring weights used by the analyzer."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _check_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"weight {name!r} must be an integer, got {value!r}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"weight {name!r} is out of range")
    return value


def _parse_i64(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


@dataclass(frozen=True)
class FingerWeights:
    """Per-finger effort weights."""

    lp: int = 77
    lr: int = 32
    lm: int = 24
    li: int = 21
    lt: int = 46
    rt: int = 46
    ri: int = 21
    rm: int = 24
    rr: int = 32
    rp: int = 77


_FINGER_NAMES = tuple(f.name for f in fields(FingerWeights))


@dataclass(frozen=True)
class Weights:
    """Weights of every statistic that makes up a layout's score."""

    sfbs: int = -7
    sfs: int = -1
    stretches: int = -3
    sft: int = -12
    inroll: int = 5
    outroll: int = 4
    alternate: int = 4
    redirect: int = -1
    onehandin: int = 1
    onehandout: int = 0
    thumb: int = 0
    fingers: FingerWeights = field(default_factory=FingerWeights)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Weights:
        """Build weights from a mapping; missing entries keep their defaults."""
        top_names = {f.name for f in fields(cls)} - {"fingers"}
        values: dict[str, Any] = {}
        for name, value in data.items():
            if name == "fingers":
                if not isinstance(value, Mapping):
                    raise ValueError("weight 'fingers' must be a table")
                unknown = set(value) - set(_FINGER_NAMES)
                if unknown:
                    raise ValueError(f"unknown finger weights: {sorted(unknown)}")
                values["fingers"] = FingerWeights(
                    **{k: _check_int(k, v) for k, v in value.items()}
                )
            elif name in top_names:
                values[name] = _check_int(name, value)
            else:
                raise ValueError(f"unknown weight {name!r}")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the weights as a nested dictionary."""
        return asdict(self)

    def with_value(self, name: str, text: str) -> Weights:
        """Return a copy with one weight set from user text.

        ``name`` is a statistic or a finger such as ``lp``. Text that is not
        a whole number leaves the weights unchanged.
        """
        if name == "fingers" or name not in {f.name for f in fields(self)} | set(
            _FINGER_NAMES
        ):
            raise ValueError(f"unknown weight {name!r}")
        value = _parse_i64(text)
        if value is None:
            return self
        if name in _FINGER_NAMES:
            return replace(self, fingers=replace(self.fingers, **{name: value}))
        return replace(self, **{name: value})