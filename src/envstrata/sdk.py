# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from envstrata.config import load_config
from envstrata.layered import LayeredConfig
from envstrata.options import ParseOptions
from envstrata.result import EnvMapping

logger = logging.getLogger(__name__)

PathArg = str | Path | list[str | Path] | None


def _build(path: PathArg, options: ParseOptions | None) -> EnvMapping:
    """Resolve files and options the same way as the CLI and merge the files."""
    cfg = load_config()
    opts = options or cfg.parse_options()
    layered = LayeredConfig(opts)
    if path is not None:
        paths = [path] if isinstance(path, (str, Path)) else list(path)
        for p in paths:
            layered.add_file(p)
    else:
        for p in cfg.resolve_files():
            layered.add_file(p, optional=cfg.optional)
    return layered.build()


def dotenv_values(
    path: PathArg = None,
    *,
    options: ParseOptions | None = None,
) -> dict[str, str | None]:
    """Return parsed values as a dict without modifying os.environ.

    Parameters
    ----------
    path : str, Path or list, optional
        File(s) to load, later files winning.  Explicit paths must exist.
        Defaults to ``ENVSTRATA_PATH`` (``os.pathsep``-separated), then the
        ``files`` list of ``.envstrata.toml``, then ``.env``.
    options : ParseOptions, optional
        Parsing options.  Defaults to those in ``.envstrata.toml``.

    Returns
    -------
    dict[str, str | None]
        Mapping of variable name to value.  ``None`` marks a key assigned
        nothing (``KEY=``).
    """
    return _build(path, options).to_dict()


def load_dotenv(
    path: PathArg = None,
    *,
    override: bool = True,
    options: ParseOptions | None = None,
) -> bool:
    """Load parsed values into os.environ (python-dotenv compatible API).

    Keys whose value is absent (``KEY=``) are not set.

    Parameters
    ----------
    path : str, Path or list, optional
        Same resolution as :func:`dotenv_values`.
    override : bool, default True
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set (matches python-dotenv semantics).
    options : ParseOptions, optional
        Parsing options.  Defaults to those in ``.envstrata.toml``.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from envstrata import load_dotenv
    >>> load_dotenv()  # ENVSTRATA_PATH, .envstrata.toml, or .env
    True
    >>> load_dotenv([".env", ".env.local"], override=False)
    False
    """
    merged = _build(path, options)
    count = 0
    for key, value in merged.items():
        if value is None:
            continue
        if key in os.environ and not override:
            continue
        os.environ[key] = value
        count += 1
    logger.debug("Set %d environment variable(s)", count)
    return count > 0
