#!/usr/bin/env python3
"""Interactive CLI for playing tic-tac-toe from a source checkout.

Usage:
    python scripts/play.py
    python scripts/play.py --config configs/play.yaml
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tictactoe.console import main


if __name__ == "__main__":
    sys.exit(main())
