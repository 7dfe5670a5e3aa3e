"""
Entry point for TeaFactory Simulator

Allows running the application with: python -m tea_factory

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from tea_factory.ui.app import main

if __name__ == "__main__":
    main()
