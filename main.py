"""Development entry point: `python -m main ...` from the repository root.

Puts `src/` on the path so `cli`, `core` and `adapters` import without an
editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
