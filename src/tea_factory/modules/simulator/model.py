"""
Dashboard Models - Trend history and run log of the primary batch

- TrendHistory: fixed-capacity ring buffers (collections.deque) holding one
  sample per simulated second.
- RunLog: CSV log of one run, from Start until Reset or a profile switch.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from collections import deque
import logging
from pathlib import Path
from typing import Deque, Dict, Optional, Union

import numpy as np

from tea_factory.io.csv_writer import CsvWriter
from tea_factory.modules.batch.model import BatchSnapshot


logger = logging.getLogger(__name__)


# Ten minutes of simulated time at one sample per second
DEFAULT_CAPACITY = 600

SERIES = ("elapsed", "moisture", "temperature_c", "aroma", "color", "quality_score")


class TrendHistory:
    """
    Ring buffers of the state vector over time.

    Attributes:
        capacity: Maximum number of samples kept per series
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._series: Dict[str, Deque[float]] = {
            name: deque(maxlen=capacity) for name in SERIES
        }
        self._last_elapsed: Optional[int] = None

    def record(self, snapshot: BatchSnapshot) -> bool:
        """
        Append a sample if simulated time has moved since the last one.

        Args:
            snapshot: Current batch state

        Returns:
            True if a sample was appended
        """
        if snapshot.elapsed_seconds == self._last_elapsed:
            return False

        self._last_elapsed = snapshot.elapsed_seconds
        self._series["elapsed"].append(float(snapshot.elapsed_seconds))
        self._series["moisture"].append(snapshot.moisture)
        self._series["temperature_c"].append(snapshot.temperature_c)
        self._series["aroma"].append(snapshot.aroma)
        self._series["color"].append(snapshot.color)
        self._series["quality_score"].append(snapshot.quality_score)
        return True

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """Get every series as a numpy array (oldest sample first)."""
        return {name: np.array(values, dtype=float) for name, values in self._series.items()}

    def clear(self) -> None:
        for values in self._series.values():
            values.clear()
        self._last_elapsed = None

    def __len__(self) -> int:
        return len(self._series["elapsed"])


class RunLog:
    """
    CSV log of one dashboard run.

    The file is created (truncated) by the first open() of a run; later
    open() calls keep appending to it until close(). One row is written per
    simulated second.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._csv: Optional[CsvWriter] = None
        self._last_elapsed: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self._csv is not None

    def open(self) -> None:
        """Start logging unless a log of the current run is already open."""
        if self._csv is not None:
            return
        self._csv = CsvWriter(self.path)
        self._csv.write_header()
        self._last_elapsed = None
        logger.info("Logging batch #1 to %s", self.path)

    def record(self, snapshot: BatchSnapshot) -> bool:
        """
        Write a row if the log is open and simulated time has moved.

        Returns:
            True if a row was written
        """
        if self._csv is None or snapshot.elapsed_seconds == self._last_elapsed:
            return False
        self._last_elapsed = snapshot.elapsed_seconds
        self._csv.write_snapshot(snapshot)
        return True

    def close(self) -> None:
        """End the run; the next open() starts a new file."""
        if self._csv is not None:
            self._csv.close()
            self._csv = None
        self._last_elapsed = None
