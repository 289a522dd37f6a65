"""
Run Seismic Token Bot

Usage:
    python run_token_bot.py
    python run_token_bot.py --env-file ./devnet.env --no-color
    python run_token_bot.py --check
"""

import sys

from seismic_token_bot.cli import main

if __name__ == "__main__":
    sys.exit(main())
