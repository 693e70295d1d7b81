"""
Typed view over the loosely typed values produced by plistlib.

A PlistValue wraps one raw value together with its kind. Accessors return
None (or an absent value) on a shape mismatch instead of raising, so the
parser never casts blindly.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class ValueKind(str, Enum):
    ABSENT = "absent"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    DATA = "data"
    DATE = "date"
    OTHER = "other"


def _kind_of(raw: Any) -> ValueKind:
    if raw is None:
        return ValueKind.ABSENT
    if isinstance(raw, str):
        return ValueKind.STRING
    # bool is an int subclass, so it has to be checked first
    if isinstance(raw, bool):
        return ValueKind.BOOLEAN
    if isinstance(raw, (int, float)):
        return ValueKind.NUMBER
    if isinstance(raw, dict):
        return ValueKind.MAPPING
    if isinstance(raw, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(raw, (bytes, bytearray)):
        return ValueKind.DATA
    if isinstance(raw, datetime.datetime):
        return ValueKind.DATE
    return ValueKind.OTHER


@dataclass(frozen=True)
class PlistValue:
    kind: ValueKind
    raw: Any = None

    @classmethod
    def wrap(cls, raw: Any) -> "PlistValue":
        return cls(kind=_kind_of(raw), raw=raw)

    @classmethod
    def absent(cls) -> "PlistValue":
        return cls(kind=ValueKind.ABSENT)

    @property
    def is_absent(self) -> bool:
        return self.kind is ValueKind.ABSENT

    def string(self) -> Optional[str]:
        return self.raw if self.kind is ValueKind.STRING else None

    def mapping(self) -> Optional[Dict[Any, Any]]:
        return self.raw if self.kind is ValueKind.MAPPING else None

    def sequence(self) -> Optional[List["PlistValue"]]:
        if self.kind is not ValueKind.SEQUENCE:
            return None
        return [PlistValue.wrap(item) for item in self.raw]

    def get(self, key: str) -> "PlistValue":
        """Value under `key`; absent when this is not a mapping or the key is missing."""
        mapping = self.mapping()
        if mapping is None or key not in mapping:
            return PlistValue.absent()
        return PlistValue.wrap(mapping[key])

    def at(self, index: int) -> "PlistValue":
        if self.kind is not ValueKind.SEQUENCE:
            return PlistValue.absent()
        try:
            return PlistValue.wrap(self.raw[index])
        except IndexError:
            return PlistValue.absent()
