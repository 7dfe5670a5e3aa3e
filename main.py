"""
Main entry point for TeaFactory Simulator

Launch the application with: python main.py

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from tea_factory.ui.app import main

if __name__ == "__main__":
    main()
