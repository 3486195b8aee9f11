#!/usr/bin/env python3
"""Lottery wheel generator."""

import sys

from lottowheel.cli import main

if __name__ == "__main__":
    sys.exit(main())
