"""Command line interface for :mod:`prefix_matching`."""

from .cli import main

if __name__ == "__main__":
    main()
