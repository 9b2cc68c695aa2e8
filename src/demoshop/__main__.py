#!/usr/bin/env python3
"""
Allow running demoshop as a module: python -m demoshop

Which is equivalent to:
    demoshop [OPTIONS] COMMAND
"""

from demoshop.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
