#!/usr/bin/env python3
"""
Minimal CLI for the design-pattern ateliers.

Runs every atelier in order and prints its output.
"""

import sys

from ateliers.demo import main


if __name__ == "__main__":
    sys.exit(main())
