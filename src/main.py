"""Run script for the Delegate Playground CLI.

From `src/`, `python -m main demo` hooks Janet's remote starter up to her car
and presses it, same as the installed `delegate-playground` script.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
