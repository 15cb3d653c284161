"""Main entry point for the netwalk package when run as a module.

This module enables running netwalk directly using 'python -m netwalk'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
