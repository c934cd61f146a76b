"""
Main entry point for icalkit.
"""

import sys
from icalkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
