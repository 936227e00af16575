"""
Entry point for running tirecalc as a module.

Usage:
    python -m tirecalc compare --input example.json
    python -m tirecalc make-example
    python -m tirecalc serve --port 8000
"""

import sys

from tirecalc.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
