from __future__ import annotations

from dataclasses import dataclass, field

"""Lookup table model (series_code -> brand_code / category_code).

lookup() returns an explicit two-outcome result so that the "missing"
detection stays separate from the default / warning policy applied by the
extractor.
"""

__all__ = [
    "Found",
    "LookupResult",
    "LookupTable",
    "MISSING",
    "Missing",
]


@dataclass(frozen=True)
class Found:
    value: str


@dataclass(frozen=True)
class Missing:
    pass


MISSING = Missing()

LookupResult = Found | Missing


@dataclass
class LookupTable:
    """Key -> value mapping built once from an auxiliary TSV.

    put() is last-seen-wins. Pairs with an empty key or value are ignored.
    """
    name: str
    entries: dict[str, str] = field(default_factory=dict)

    def put(self, key: str, value: str) -> None:
        if key and value:
            self.entries[key] = value

    def lookup(self, key: str) -> LookupResult:
        value = self.entries.get(key)
        if value:
            return Found(value)
        return MISSING

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_mapping(cls, name: str, mapping: dict[str, str]) -> LookupTable:
        table = cls(name=name)
        for k, v in mapping.items():
            table.put(k, v)
        return table
