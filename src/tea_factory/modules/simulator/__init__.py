"""
Simulator Module - Interactive run of one or more batches

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Trend history ring buffers and run log
- controller.py: Start/pause/reset run control
- view.py: Tkinter dashboard with Matplotlib trend plot (imported on demand)

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from tea_factory.modules.simulator.model import RunLog, TrendHistory
from tea_factory.modules.simulator.controller import SimulatorController

__all__ = [
    "RunLog",
    "TrendHistory",
    "SimulatorController",
]
