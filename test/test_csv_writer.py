"""
Unit tests for the CSV log writer

Tests header handling, row format and tolerance to unusable files.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import logging

import pytest
from tea_factory.io import CSV_HEADER, CsvWriter, format_row
from tea_factory.modules.batch import TeaBatch


HEADER_LINE = "process,elapsedSeconds,moisture,temperatureC,aroma,color,qualityScore,qualityStatus"


@pytest.fixture
def csv_path(tmp_path):
    """Fixture providing a fresh CSV path."""
    return tmp_path / "log.csv"


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


class TestHeader:
    """Test the header-once guarantee."""

    def test_header_columns(self):
        assert ",".join(CSV_HEADER) == HEADER_LINE

    def test_header_written_once(self, csv_path):
        with CsvWriter(csv_path) as csv:
            csv.write_header()
            csv.write_header()
            csv.write_row("STEAMING", 1, 0.75, 25.0, 10.0, 10.0)
            csv.write_header()

        lines = read_lines(csv_path)
        assert lines.count(HEADER_LINE) == 1
        assert lines[0] == HEADER_LINE
        assert len(lines) == 2

    def test_first_row_writes_missing_header(self, csv_path):
        with CsvWriter(csv_path) as csv:
            csv.write_row("STEAMING", 1, 0.75, 25.0, 10.0, 10.0)
            assert csv.header_written

        assert read_lines(csv_path)[0] == HEADER_LINE

    def test_file_truncated_on_open(self, csv_path):
        csv_path.write_text("old content\n", encoding="utf-8")
        with CsvWriter(csv_path) as csv:
            csv.write_header()
        assert read_lines(csv_path) == [HEADER_LINE]


class TestRows:
    """Test row formatting."""

    def test_row_precision(self):
        row = format_row("ROLLING", 42, 0.5, 70.0, 50.0, 40.0)
        assert row == ["ROLLING", "42", "0.500000", "70.000", "50.000", "40.000", "46.00", "BAD"]

    def test_good_row(self):
        row = format_row("DRYING", 120, 0.0, 60.0, 100.0, 100.0)
        assert row[-2:] == ["100.00", "GOOD"]

    def test_snapshot_row(self, csv_path):
        batch = TeaBatch()
        batch.step(1)
        with CsvWriter(csv_path) as csv:
            csv.write_snapshot(batch.snapshot())

        assert read_lines(csv_path)[1] == "STEAMING,1,0.750800,30.600,10.900,10.180,13.42,BAD"


class TestTolerance:
    """Test that file problems never raise."""

    def test_unopenable_path(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="tea_factory.io.csv_writer")
        csv = CsvWriter(tmp_path / "missing" / "log.csv")

        assert not csv.is_open
        csv.write_header()
        csv.write_row("STEAMING", 1, 0.75, 25.0, 10.0, 10.0)
        csv.close()
        assert any("Cannot open" in r.getMessage() for r in caplog.records)

    def test_write_after_close_is_skipped(self, csv_path):
        csv = CsvWriter(csv_path)
        csv.write_row("STEAMING", 1, 0.75, 25.0, 10.0, 10.0)
        csv.close()
        csv.write_row("STEAMING", 2, 0.75, 25.0, 10.0, 10.0)

        assert len(read_lines(csv_path)) == 2

    def test_close_twice(self, csv_path):
        csv = CsvWriter(csv_path)
        csv.close()
        csv.close()
        assert not csv.is_open
