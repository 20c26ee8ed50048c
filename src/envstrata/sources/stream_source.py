# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""StreamSource -- parse .env content from an already-open stream."""

from __future__ import annotations

from envstrata.env_file import EnvInput, parse
from envstrata.options import ParseOptions
from envstrata.result import EnvMapping
from envstrata.source import EnvSource


class StreamSource(EnvSource):
    """Parse a caller-supplied stream.

    A stream can only be read once, so the mapping from the first
    :meth:`load` is kept and returned on later calls.
    """

    source_name: str = "stream"
    source_display_name: str = "In-memory or piped .env stream"

    def __init__(self, stream: EnvInput, *, options: ParseOptions | None = None) -> None:
        if stream is None:
            raise ValueError("stream must not be None")
        super().__init__(options)
        self._stream = stream
        self._loaded: EnvMapping | None = None

    def load(self) -> EnvMapping:
        if self._loaded is None:
            self._loaded = parse(self._stream, self.options)
        return self._loaded.copy()

    def describe(self) -> str:
        name = getattr(self._stream, "name", None)
        return f"StreamSource for '{name}'" if name else "StreamSource"
