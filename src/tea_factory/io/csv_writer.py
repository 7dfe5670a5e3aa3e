"""
CSV log writer

One header line, then one row per simulated step:

    process,elapsedSeconds,moisture,temperatureC,aroma,color,qualityScore,qualityStatus

The file is truncated on open. A writer whose file could not be opened, was
closed, or failed mid-run skips every later write; the failure is logged
once and never reaches the simulation loop.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from tea_factory.core.quality import quality_score, quality_status
from tea_factory.modules.batch.model import BatchSnapshot


logger = logging.getLogger(__name__)

CSV_HEADER = (
    "process",
    "elapsedSeconds",
    "moisture",
    "temperatureC",
    "aroma",
    "color",
    "qualityScore",
    "qualityStatus",
)


def format_row(
    process: object,
    elapsed_seconds: int,
    moisture: float,
    temperature_c: float,
    aroma: float,
    color: float,
) -> List[str]:
    """
    Format one CSV row with fixed precision.

    The score is computed from the given (instantaneous) values.

    Returns:
        Row fields as strings
    """
    score = quality_score(moisture, aroma, color)
    return [
        str(process),
        str(int(elapsed_seconds)),
        f"{moisture:.6f}",
        f"{temperature_c:.3f}",
        f"{aroma:.3f}",
        f"{color:.3f}",
        f"{score:.2f}",
        quality_status(score).value,
    ]


class CsvWriter:
    """Append-only CSV log of a run."""

    def __init__(self, path: Union[str, Path]):
        """
        Open (and truncate) the log file.

        Args:
            path: Output file path
        """
        self.path = Path(path)
        self._file: Optional[TextIO] = None
        self._writer = None
        self._header_written = False

        try:
            self._file = open(self.path, "w", newline="", encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot open CSV log %s: %s", self.path, e)
        else:
            self._writer = csv.writer(self._file, lineterminator="\n")

    @property
    def is_open(self) -> bool:
        return self._file is not None and not self._file.closed

    @property
    def header_written(self) -> bool:
        return self._header_written

    def write_header(self) -> None:
        """Write the header line; later calls do nothing."""
        if self._header_written or not self.is_open:
            return
        if self._write(CSV_HEADER):
            self._header_written = True

    def write_row(
        self,
        process: object,
        elapsed_seconds: int,
        moisture: float,
        temperature_c: float,
        aroma: float,
        color: float,
    ) -> None:
        """Write one data row, preceded by the header if still missing."""
        if not self.is_open:
            return
        self.write_header()
        self._write(format_row(process, elapsed_seconds, moisture, temperature_c, aroma, color))

    def write_snapshot(self, snapshot: BatchSnapshot) -> None:
        """Write the row of a batch snapshot."""
        self.write_row(
            snapshot.process,
            snapshot.elapsed_seconds,
            snapshot.moisture,
            snapshot.temperature_c,
            snapshot.aroma,
            snapshot.color,
        )

    def _write(self, fields) -> bool:
        try:
            self._writer.writerow(fields)
        except (OSError, ValueError) as e:
            # ValueError: I/O operation on a file closed underneath us
            logger.warning("Writing CSV log %s failed, logging disabled: %s", self.path, e)
            self.close()
            return False
        return True

    def flush(self) -> None:
        if self.is_open:
            self._file.flush()

    def close(self) -> None:
        if self._file is None:
            return
        try:
            self._file.close()
        except OSError as e:
            logger.warning("Closing CSV log %s failed: %s", self.path, e)
        self._file = None
        self._writer = None

    def __enter__(self) -> "CsvWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
