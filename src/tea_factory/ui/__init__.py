"""
UI Package - Graphical user interface of the simulator

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from tea_factory.ui.app import MainWindow

__all__ = ["MainWindow"]
