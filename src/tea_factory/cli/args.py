"""
Command-line arguments of the batch runner

parse_args() never exits the interpreter: problems are reported in
Args.error and help requests in Args.show_help, leaving the exit code to
the caller.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from tea_factory.core.config import MAX_BATCHES, MAX_SECONDS, SimulationConfig
from tea_factory.core.model_params import ModelType, model_type_from_name


PROG = "tea-factory-cli"
DEFAULT_CSV_PATH = "tea_factory_cli.csv"


class ArgsError(Exception):
    """Raised by the parser instead of exiting."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgsError(message)


@dataclass
class Args:
    """Parsed command line."""
    dt_seconds: int = 1
    steaming_seconds: int = 30
    rolling_seconds: int = 30
    drying_seconds: int = 60
    model: ModelType = ModelType.DEFAULT
    batch_count: int = 1

    csv_enabled: bool = True
    csv_path: str = DEFAULT_CSV_PATH

    verbose: bool = False
    show_help: bool = False
    error: Optional[str] = None

    def to_config(self) -> SimulationConfig:
        """Build the run configuration."""
        return SimulationConfig(
            dt_seconds=self.dt_seconds,
            steaming_seconds=self.steaming_seconds,
            rolling_seconds=self.rolling_seconds,
            drying_seconds=self.drying_seconds,
            model=self.model,
            batch_count=self.batch_count,
        )


def positive_seconds(text: str) -> int:
    """Parse a duration in (0, MAX_SECONDS]."""
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value: {text!r}")
    if not 0 < value <= MAX_SECONDS:
        raise argparse.ArgumentTypeError(f"must be in [1, {MAX_SECONDS}], got {value}")
    return value


def batch_count(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value: {text!r}")
    if not 1 <= value <= MAX_BATCHES:
        raise argparse.ArgumentTypeError(f"must be in [1, {MAX_BATCHES}], got {value}")
    return value


def model_name(text: str) -> ModelType:
    try:
        return model_type_from_name(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser (help is handled by parse_args)."""
    parser = _Parser(
        prog=PROG,
        description="TeaFactory Simulator (CLI)",
        add_help=False,
    )
    parser.add_argument("--dt", dest="dt_seconds", type=positive_seconds, default=1,
                        metavar="SEC", help="Time step seconds (default: 1)")
    parser.add_argument("--steaming", dest="steaming_seconds", type=positive_seconds,
                        default=30, metavar="SEC", help="Steaming duration (default: 30)")
    parser.add_argument("--rolling", dest="rolling_seconds", type=positive_seconds,
                        default=30, metavar="SEC", help="Rolling duration (default: 30)")
    parser.add_argument("--drying", dest="drying_seconds", type=positive_seconds,
                        default=60, metavar="SEC", help="Drying duration (default: 60)")
    parser.add_argument("--model", type=model_name, default=ModelType.DEFAULT,
                        metavar="NAME", help="Model: default|gentle|aggressive")
    parser.add_argument("--batches", dest="batch_count", type=batch_count, default=1,
                        metavar="N", help=f"Number of batches, 1..{MAX_BATCHES} (default: 1)")
    parser.add_argument("--csv", dest="csv_path", default=DEFAULT_CSV_PATH, metavar="PATH",
                        help=f"CSV output path (default: {DEFAULT_CSV_PATH})")
    parser.add_argument("--no-csv", dest="csv_enabled", action="store_false",
                        help="Disable CSV output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-h", "--help", dest="show_help", action="store_true",
                        help="Show help")
    return parser


def help_text() -> str:
    return build_parser().format_help()


def parse_args(argv: Sequence[str]) -> Args:
    """
    Parse command-line arguments.

    Args:
        argv: Arguments without the program name

    Returns:
        Args; on failure Args.error holds the reason
    """
    argv = list(argv)

    # Help wins over any other (possibly invalid) argument
    if "-h" in argv or "--help" in argv:
        return Args(show_help=True)

    try:
        namespace = build_parser().parse_args(argv)
    except ArgsError as e:
        return Args(error=str(e))

    if not namespace.csv_path:
        return Args(error="CSV path is empty")

    return Args(
        dt_seconds=namespace.dt_seconds,
        steaming_seconds=namespace.steaming_seconds,
        rolling_seconds=namespace.rolling_seconds,
        drying_seconds=namespace.drying_seconds,
        model=namespace.model,
        batch_count=namespace.batch_count,
        csv_enabled=namespace.csv_enabled,
        csv_path=namespace.csv_path,
        verbose=namespace.verbose,
    )
