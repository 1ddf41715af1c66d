#!/usr/bin/env python3
"""Main entry point for the model catalog CLI."""
import sys

from modelhub.cli import main

if __name__ == "__main__":
    sys.exit(main())
