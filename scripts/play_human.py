#!/usr/bin/env python3
"""
Human Play Mode - Play the Snake game yourself.

Controls:
    Arrow Keys: Steer the snake
    Close the window to quit
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from classic_snake.app import main


if __name__ == "__main__":
    main()
