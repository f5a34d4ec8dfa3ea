#!/usr/bin/env python3
"""PomoTimer entry point.

Run with:
    python main.py
    python -m pomotimer
"""

from pomotimer.__main__ import main


if __name__ == "__main__":
    main()
