# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Options controlling a single parse."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DuplicateKeyBehavior(Enum):
    """What to do when a key appears more than once (case-insensitively)."""

    USE_LAST = "last"
    USE_FIRST = "first"
    THROW = "error"

    @classmethod
    def from_name(cls, name: str) -> DuplicateKeyBehavior:
        """Look up a behavior by its config/CLI name (``last``, ``first``, ``error``)."""
        choices = ", ".join(b.value for b in cls)
        if not isinstance(name, str):
            raise ValueError(
                f"Duplicate key behavior must be a string, got {name!r}. Choose one of: {choices}"
            )
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown duplicate key behavior {name!r}. Choose one of: {choices}"
            ) from None


@dataclass(frozen=True)
class ParseOptions:
    """Immutable parse configuration.

    Defaults match the lenient behavior most .env consumers expect: variable
    expansion on, only ``#`` comments, last duplicate wins, malformed lines
    skipped rather than reported.
    """

    expand_variables: bool = True
    alternative_comments: bool = False
    duplicate_key_behavior: DuplicateKeyBehavior = DuplicateKeyBehavior.USE_LAST
    strict: bool = False

    @property
    def comment_markers(self) -> tuple[str, ...]:
        """Markers that start a comment under these options."""
        if self.alternative_comments:
            return ("#", ";", "//")
        return ("#",)
