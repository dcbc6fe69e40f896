#!/usr/bin/env python3
"""
Main entry point for Bookmark Pinner.
"""

import sys

from bookmark_pinner.cli import main

if __name__ == "__main__":
    sys.exit(main())
