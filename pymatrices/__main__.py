"""Command-line interface."""
import sys

from pymatrices.walkthrough import main

if __name__ == "__main__":
    sys.exit(main())
