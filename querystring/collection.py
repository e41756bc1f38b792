"""
Ordered multi-valued output collection.

A Values instance maps each parameter name to the list of strings encoded for
it. Keys keep the order in which they were first added.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple


class Values(dict):
    """
    Mapping from parameter name to an ordered list of string values.

    This is the result type of the record encoder and the shape expected by
    query string serializers such as ``urllib.parse.urlencode(..., doseq=True)``.
    """

    def add(self, key: str, value: str) -> None:
        """Append a value under key, creating the key if needed."""
        self.setdefault(key, []).append(value)

    def extend(self, key: str, values) -> None:
        """Append each of values under key, in order."""
        for value in values:
            self.add(key, value)

    def set(self, key: str, value: str) -> None:
        """Replace every value under key with a single value."""
        self[key] = [value]

    def get_first(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the first value under key, or default if there is none."""
        values = super().get(key)
        if not values:
            return default
        return values[0]

    def get_all(self, key: str) -> List[str]:
        """Return a copy of every value under key."""
        return list(super().get(key, []))

    def value_count(self) -> int:
        """Return the total number of values across all keys."""
        return sum(len(values) for values in self.values())

    def iter_pairs(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) pairs in key order, then value order."""
        for key, values in self.items():
            for value in values:
                yield key, value

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Return every (key, value) pair as a list."""
        return list(self.iter_pairs())

    def copy(self) -> "Values":
        """Return a copy whose value lists are independent of this one."""
        return Values((key, list(values)) for key, values in self.items())

    def __repr__(self) -> str:
        return f"Values({dict.__repr__(self)})"


__all__ = ["Values"]
