"""`python -m main` from inside `src/`; same CLI as the `repo-walker` script."""

from __future__ import annotations

import sys

# Windows consoles default to cp1252; organization/repository names may not fit it.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
