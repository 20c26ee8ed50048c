# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse errors raised for malformed .env input.

Every error carries a stable code so tooling can match on it without
scraping the message:

  ENV001  line has no ``=`` separator (strict mode)
  ENV002  duplicate key under the ``error`` duplicate policy
  ENV003  key fails format validation (strict mode)
  ENV004  quoted value has unbalanced quotes
  ENV005  illegal or dangling line continuation
  ENV006  key spans multiple lines (strict mode)
"""

from __future__ import annotations

ENV001 = "ENV001"
ENV002 = "ENV002"
ENV003 = "ENV003"
ENV004 = "ENV004"
ENV005 = "ENV005"
ENV006 = "ENV006"

ERROR_CODES: tuple[str, ...] = (ENV001, ENV002, ENV003, ENV004, ENV005, ENV006)


class DotEnvParseError(ValueError):
    """Raised when .env content is syntactically invalid.

    ``code`` is one of :data:`ERROR_CODES`, ``line`` is the 1-based line the
    offending logical line started on.
    """

    def __init__(self, code: str, line: int, message: str) -> None:
        super().__init__(f"{code} at line {line}: {message}")
        self.code = code
        self.line = line
        self.message = message

    def __reduce__(self):
        return (type(self), (self.code, self.line, self.message))
