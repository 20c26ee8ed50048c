# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envstrata -- strict, layered .env parsing with positional diagnostics."""

from envstrata.env_file import dumps, parse, parse_env_file, parse_string
from envstrata.errors import DotEnvParseError
from envstrata.layered import LayeredConfig
from envstrata.options import DuplicateKeyBehavior, ParseOptions
from envstrata.result import EnvMapping
from envstrata.sdk import dotenv_values, load_dotenv

__all__ = [
    "__version__",
    "DotEnvParseError",
    "DuplicateKeyBehavior",
    "EnvMapping",
    "LayeredConfig",
    "ParseOptions",
    "dotenv_values",
    "dumps",
    "load_dotenv",
    "parse",
    "parse_env_file",
    "parse_string",
]
__version__ = "0.3.0"
