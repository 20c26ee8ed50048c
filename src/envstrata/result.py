# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Case-insensitive mapping returned by the parser."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any


def _fold(key: str) -> str:
    return key.casefold()


class EnvMapping(MutableMapping[str, "str | None"]):
    """Mapping of .env keys to values with case-insensitive lookup.

    A value of ``None`` means the key was assigned nothing (``KEY=``), which
    is distinct from an explicit empty string (``KEY=""``). The spelling of a
    key is the one it was first stored under; overwriting through another
    spelling keeps the original.
    """

    def __init__(self, data: Mapping[str, str | None] | None = None, **kwargs: str | None) -> None:
        self._store: dict[str, tuple[str, str | None]] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, key: str) -> str | None:
        return self._store[_fold(key)][1]

    def __setitem__(self, key: str, value: str | None) -> None:
        folded = _fold(key)
        existing = self._store.get(folded)
        self._store[folded] = (existing[0] if existing else key, value)

    def __delitem__(self, key: str) -> None:
        del self._store[_fold(key)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self._store

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if not all(isinstance(k, str) for k in other):
            return False
        other = EnvMapping(other)
        if len(other) != len(self):
            return False
        return all(k in other and other[k] == v for k, v in self.items())

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> EnvMapping:
        return EnvMapping(self)

    def to_dict(self) -> dict[str, str | None]:
        """Return a plain dict using each key's stored spelling."""
        return dict(self._store.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
