"""Run the CLI with `python -m rigbuilder`."""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; rich output needs utf-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from rigbuilder.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
