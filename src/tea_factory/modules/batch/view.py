"""
Batch View - Console output of a batch run

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import sys
from typing import Optional, TextIO

from tea_factory.modules.batch.model import BatchSnapshot, TeaBatch


# Bracketed stage label is left-justified to this width ("[STEAMING] ")
LABEL_WIDTH = 11


class BatchView:
    """
    View component for batch runs.

    Only formatting and printing happen here.
    """

    @staticmethod
    def format_step_line(snapshot: BatchSnapshot, batch_index: Optional[int] = None) -> str:
        """
        Format one step as a console line.

        Args:
            snapshot: State after the step
            batch_index: 1-based batch number, prefixed as "#k " when given

        Returns:
            Line without trailing newline
        """
        label = f"[{snapshot.process}]".ljust(LABEL_WIDTH)
        prefix = f"#{batch_index} " if batch_index is not None else ""
        return (
            f"{prefix}{label}t={snapshot.elapsed_seconds}s "
            f"moisture={snapshot.moisture:.2f} "
            f"temp={snapshot.temperature_c:.1f} "
            f"aroma={snapshot.aroma:.1f} "
            f"color={snapshot.color:.1f}"
        )

    @staticmethod
    def display_step(
        snapshot: BatchSnapshot,
        batch_index: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Print one step line."""
        print(BatchView.format_step_line(snapshot, batch_index), file=stream or sys.stdout)

    @staticmethod
    def format_summary(batch: TeaBatch, batch_index: Optional[int] = None) -> str:
        """
        Format the final quality line of a batch.

        Args:
            batch: Finished batch
            batch_index: 1-based batch number

        Returns:
            Summary line
        """
        prefix = f"#{batch_index} " if batch_index is not None else ""
        return (
            f"{prefix}[QUALITY] score={batch.quality_score:.2f} "
            f"status={batch.quality_status.value} "
            f"model={batch.model_type.value} "
            f"t={batch.elapsed_seconds}s"
        )

    @staticmethod
    def display_summary(
        batch: TeaBatch,
        batch_index: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Print the final quality line of a batch."""
        print(BatchView.format_summary(batch, batch_index), file=stream or sys.stdout)
