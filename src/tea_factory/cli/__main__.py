"""
Entry point for the batch CLI runner

Allows running with: python -m tea_factory.cli

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import sys

from tea_factory.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
