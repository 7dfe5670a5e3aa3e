"""File output of simulation runs"""

from tea_factory.io.csv_writer import CSV_HEADER, CsvWriter, format_row

__all__ = [
    "CSV_HEADER",
    "CsvWriter",
    "format_row",
]
