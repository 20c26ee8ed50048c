# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".envstrata.toml configuration loading.

Searches upward from cwd for ``.envstrata.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from envstrata.options import DuplicateKeyBehavior, ParseOptions

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

CONFIG_FILENAME = ".envstrata.toml"
DEFAULT_FILES: tuple[str, ...] = (".env",)


@dataclass
class EnvstrataConfig:
    """Resolved configuration for the current invocation."""

    files: list[str] = field(default_factory=lambda: list(DEFAULT_FILES))
    optional: bool = True
    expand_variables: bool = True
    alternative_comments: bool = False
    duplicate_keys: str = "last"
    strict: bool = False
    config_path: Path | None = None

    def parse_options(self, **overrides: Any) -> ParseOptions:
        """Build :class:`ParseOptions`; non-``None`` *overrides* win over the file."""
        values: dict[str, Any] = {
            "expand_variables": self.expand_variables,
            "alternative_comments": self.alternative_comments,
            "duplicate_keys": self.duplicate_keys,
            "strict": self.strict,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ParseOptions(
            expand_variables=bool(values["expand_variables"]),
            alternative_comments=bool(values["alternative_comments"]),
            duplicate_key_behavior=DuplicateKeyBehavior.from_name(values["duplicate_keys"]),
            strict=bool(values["strict"]),
        )

    def resolve_files(self, paths: list[str] | tuple[str, ...] | None = None) -> list[Path]:
        """Files to load: explicit *paths*, then ``ENVSTRATA_PATH``, then config.

        Relative config entries are resolved against the config file's directory.
        """
        if paths:
            return [Path(p) for p in paths]
        env_paths = os.environ.get("ENVSTRATA_PATH")
        if env_paths:
            return [Path(p) for p in env_paths.split(os.pathsep) if p]
        base = self.config_path.parent if self.config_path is not None else None
        resolved: list[Path] = []
        for name in self.files:
            p = Path(name)
            resolved.append(base / p if base is not None and not p.is_absolute() else p)
        return resolved


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envstrata.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnvstrataConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvstrataConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("envstrata", {})

    files = section.get("files", list(DEFAULT_FILES))
    if isinstance(files, str):
        files = [files]

    cfg = EnvstrataConfig(
        files=list(files),
        optional=section.get("optional", True),
        expand_variables=section.get("expand_variables", True),
        alternative_comments=section.get("alternative_comments", False),
        duplicate_keys=section.get("duplicate_keys", "last"),
        strict=section.get("strict", False),
        config_path=path,
    )
    DuplicateKeyBehavior.from_name(cfg.duplicate_keys)
    return cfg
