# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envstrata CLI (run via ``envstrata`` or ``python -m envstrata``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from envstrata.cli import cli
    except ImportError:
        sys.stderr.write("Envstrata CLI dependencies missing. Install with: pip install envstrata\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
