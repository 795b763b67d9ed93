"""Convenience script: pipe the In the news page in, get the Atom feed out.

    curl -sSLf https://en.wikipedia.org/wiki/Template:In_the_news | python run_feed.py > feed.xml
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src directory is on the Python path so the wikiitn package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from wikiitn.cli import main  # noqa: E402  (import after path setup)


if __name__ == "__main__":
    main()
