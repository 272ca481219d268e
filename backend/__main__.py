"""
Entry point for `python -m backend`; same commands as the `dreamshape` script.
"""
import sys

from backend.cli import main

if __name__ == "__main__":
    sys.exit(main())
