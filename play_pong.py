#!/usr/bin/env python3
"""
Main script to launch Pong with its PyGame window

Run from the repository root: images are loaded from ./resources
"""

import sys

from classic_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== PONG ===")
    print()
    print("CONTROLS:")
    print("  Player 1 (Left): W/S")
    print("  Player 2 (Right): Up/Down arrows")
    print("  ESC: Quit")
    print()

    sys.exit(main())
