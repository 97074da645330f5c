"""
Value store for message substitution data.

A ``Values`` instance maps names to arbitrary Python objects. Lookups for
names that were never stored return the ``MISSING`` sentinel, so a stored
``None`` stays distinguishable from an absent key.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, MutableMapping, Optional


class _Missing:
    """Type of the ``MISSING`` sentinel."""

    _instance: Optional[_Missing] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Value keys must be strings, got {type(key).__name__}")


class Values(MutableMapping[str, Any]):
    """Mapping from key to value supplying data to a render."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self._data: Dict[str, Any] = {}
        if initial is not None:
            self.add(initial)
        if kwargs:
            self.add(kwargs)

    def add(self, values: Optional[Mapping[str, Any]]) -> None:
        """Merge every entry of ``values`` in, overwriting existing keys."""
        if not values:
            return
        for key in values:
            _check_key(key)
        self._data.update(values)

    def set(self, key: str, value: Any) -> None:
        _check_key(key)
        self._data[key] = value

    def get(self, key: str, default: Any = MISSING) -> Any:
        """Return the value stored under ``key``, or ``default`` (``MISSING``) if absent."""
        return self._data.get(key, default)

    def delete(self, key: str) -> None:
        """Remove ``key`` if present; absent keys are ignored."""
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data = {}

    def keys(self) -> List[str]:  # type: ignore[override]
        return list(self._data)

    def count(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self.count() == 0

    def has_values(self) -> bool:
        return self.count() > 0

    def to_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the stored entries."""
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Values({self._data!r})"
