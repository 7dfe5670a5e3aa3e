"""Command-line batch runner"""

from tea_factory.cli.args import Args, help_text, parse_args
from tea_factory.cli.main import main

__all__ = [
    "Args",
    "help_text",
    "parse_args",
    "main",
]
