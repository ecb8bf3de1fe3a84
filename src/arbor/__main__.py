"""Main entry point for the Arbor package when run as a module.

This module enables running Arbor directly using 'python -m arbor'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main(sys.argv[1:]))


if __name__ == "__main__":
    main()
