#!/usr/bin/env python3
"""Run the extractor without installing the package: ``python extract_goodreads_cookies.py``."""

import sys
from pathlib import Path


sys.path.insert(0, str(Path(__file__).parent / "src"))

from goodreads_cookies.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
