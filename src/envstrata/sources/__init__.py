# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Source plugin registry -- built-in sources plus the ``envstrata.sources`` entry-point group."""

from __future__ import annotations

from collections.abc import Iterator
from importlib.metadata import entry_points

from envstrata.source import EnvSource
from envstrata.sources.file_source import FileSource
from envstrata.sources.stream_source import StreamSource

_BUILTIN: dict[str, type[EnvSource]] = {
    FileSource.source_name: FileSource,
    StreamSource.source_name: StreamSource,
}


def get_source_entries() -> Iterator[tuple[str, type[EnvSource]]]:
    """Yield (name, source_class): built-ins first, then plugins alphabetically."""
    yield from _BUILTIN.items()
    for name in list_source_names():
        if name not in _BUILTIN:
            yield name, get_source_class(name)


def get_source_class(name: str) -> type[EnvSource]:
    """Return the source class registered as *name*.

    Raises ``KeyError`` with a helpful message when the name is unknown.
    """
    if name in _BUILTIN:
        return _BUILTIN[name]
    eps = entry_points(group="envstrata.sources")
    for ep in eps:
        if ep.name == name:
            return ep.load()

    available = list_source_names()
    raise KeyError(
        f"Unknown source {name!r}. Available sources: {', '.join(available) or '(none)'}"
    )


def list_source_names() -> list[str]:
    """Return sorted names of all built-in and registered sources."""
    eps = entry_points(group="envstrata.sources")
    return sorted(set(_BUILTIN) | {ep.name for ep in eps})


__all__ = [
    "FileSource",
    "StreamSource",
    "get_source_class",
    "get_source_entries",
    "list_source_names",
]
