"""Main script for generating locale key constants and messages."""

import sys
from pathlib import Path

# Add src to path if package is not installed
try:
    from localekeys.cli import main
except ModuleNotFoundError:
    sys.path.insert(0, str(Path(__file__).parent / 'src'))
    from localekeys.cli import main


if __name__ == '__main__':
    sys.exit(main())
