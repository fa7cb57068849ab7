#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Card games console launcher.

Runs the click entry point from a source checkout:
    python cli_game.py --seed 7 --registry users.json
"""

from card_games.ui.cli.cli_game import main


if __name__ == "__main__":
    main()
