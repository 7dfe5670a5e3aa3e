"""
Batch CLI runner

Runs every batch from STEAMING to FINISHED with a fixed time step, printing
one line per step and writing an optional CSV log per batch.

Usage: tea-factory-cli [--dt SEC] [--model NAME] [--batches N] ...

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import logging
from pathlib import Path
import sys
from typing import Optional, Sequence

from tea_factory.cli.args import Args, help_text, parse_args
from tea_factory.core.config import SimulationConfig
from tea_factory.io.csv_writer import CsvWriter
from tea_factory.modules.batch import BatchController, BatchSnapshot, BatchView


logger = logging.getLogger(__name__)


def csv_path_for(path: str, batch_index: int, batch_count: int) -> Path:
    """
    CSV path of one batch.

    A single batch uses the path as given; with several batches the
    1-based index is appended to the stem (log.csv -> log_2.csv).
    """
    csv_path = Path(path)
    if batch_count <= 1:
        return csv_path
    return csv_path.with_name(f"{csv_path.stem}_{batch_index}{csv_path.suffix}")


def run_batch(
    config: SimulationConfig,
    csv_path: Optional[Path] = None,
    batch_index: Optional[int] = None,
) -> BatchSnapshot:
    """
    Run one batch to completion.

    Args:
        config: Run configuration
        csv_path: CSV log path, None to disable
        batch_index: Number shown in front of each line, None for no prefix

    Returns:
        Final snapshot
    """
    controller = BatchController(config)
    csv = CsvWriter(csv_path) if csv_path is not None else None

    def on_step(snapshot: BatchSnapshot) -> None:
        BatchView.display_step(snapshot, batch_index)
        if csv is not None:
            csv.write_snapshot(snapshot)

    try:
        if csv is not None:
            csv.write_header()
        final = controller.run(on_step)
    finally:
        if csv is not None:
            csv.close()

    BatchView.display_summary(controller.batch, batch_index)
    return final


def run(args: Args) -> int:
    """Run every requested batch; returns the exit code."""
    config = args.to_config()
    config.validate()
    logger.debug("Run configuration: %s", config.to_dict())

    for index in range(1, config.batch_count + 1):
        csv_path = (
            csv_path_for(args.csv_path, index, config.batch_count)
            if args.csv_enabled else None
        )
        batch_index = index if config.batch_count > 1 else None
        run_batch(config, csv_path, batch_index)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        0 on success or help, 2 on invalid arguments
    """
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.error is not None:
        print(f"Error: {args.error}\n", file=sys.stderr)
        print(help_text(), file=sys.stderr, end="")
        return 2
    if args.show_help:
        print(help_text(), end="")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
