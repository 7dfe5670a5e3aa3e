"""
Batch Module - Stage sequencer of one tea batch

Architecture: MVC (Model-View-Controller)

Components:
- model.py: TeaBatch sequencer and BatchSnapshot
- controller.py: Fixed-step run driver
- view.py: Console output

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from tea_factory.modules.batch.model import BatchSnapshot, TeaBatch
from tea_factory.modules.batch.controller import BatchController
from tea_factory.modules.batch.view import BatchView

__all__ = [
    "BatchSnapshot",
    "TeaBatch",
    "BatchController",
    "BatchView",
]
