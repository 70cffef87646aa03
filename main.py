"""Run `menagerie` from a source checkout.

    python main.py animals --format xml
    python main.py shapes --format json --output file

Same commands as the installed `menagerie` script; `src/` is added to the
import path so `cli`, `core` and `adapters` resolve without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"

if __name__ == "__main__":
    sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()
