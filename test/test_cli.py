"""
Unit tests for the command-line runner

Tests argument parsing, exit codes, console output and CSV files.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import pytest
from tea_factory.cli import Args, help_text, main, parse_args
from tea_factory.cli.main import csv_path_for
from tea_factory.core.model_params import ModelType


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.error is None
        assert args == Args()
        assert args.csv_enabled
        assert args.csv_path == "tea_factory_cli.csv"

    def test_all_options(self):
        args = parse_args([
            "--dt", "5", "--steaming", "40", "--rolling", "20", "--drying", "90",
            "--model", "gentle", "--batches", "3", "--csv", "out.csv", "-v",
        ])
        assert args.error is None
        assert args.dt_seconds == 5
        assert args.steaming_seconds == 40
        assert args.rolling_seconds == 20
        assert args.drying_seconds == 90
        assert args.model == ModelType.GENTLE
        assert args.batch_count == 3
        assert args.csv_path == "out.csv"
        assert args.verbose

    def test_dt_larger_than_stage_accepted(self):
        args = parse_args(["--dt", "120"])
        assert args.error is None
        assert args.dt_seconds == 120

    @pytest.mark.parametrize(
        "argv",
        [
            ["--dt", "0"],
            ["--dt", "-3"],
            ["--dt", "abc"],
            ["--steaming", "86401"],
            ["--rolling", "1.5"],
            ["--batches", "0"],
            ["--batches", "17"],
            ["--dt"],
            ["--unknown"],
            ["extra"],
        ],
    )
    def test_invalid_arguments(self, argv):
        args = parse_args(argv)
        assert args.error is not None

    def test_invalid_model(self):
        args = parse_args(["--model", "extreme"])
        assert "Invalid model" in args.error

    def test_empty_csv_path(self):
        assert parse_args(["--csv", ""]).error == "CSV path is empty"

    def test_no_csv(self):
        assert not parse_args(["--no-csv"]).csv_enabled

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag):
        args = parse_args([flag])
        assert args.show_help
        assert args.error is None

    def test_help_wins_over_errors(self):
        args = parse_args(["--dt", "0", "--help"])
        assert args.show_help
        assert args.error is None

    def test_to_config(self):
        config = parse_args(["--dt", "2", "--model", "aggressive"]).to_config()
        assert config.dt_seconds == 2
        assert config.model == ModelType.AGGRESSIVE
        assert config.total_seconds == 120


class TestHelpText:
    """Test help output."""

    def test_lists_options(self):
        text = help_text()
        for option in ("--dt", "--steaming", "--rolling", "--drying", "--model",
                       "--batches", "--csv", "--no-csv", "--help"):
            assert option in text


class TestMain:
    """Test the CLI entry point."""

    def test_help_exit_code(self, capsys):
        assert main(["--help"]) == 0
        out, err = capsys.readouterr()
        assert "--dt" in out
        assert err == ""

    def test_error_exit_code(self, capsys):
        assert main(["--dt", "0"]) == 2
        out, err = capsys.readouterr()
        assert err.startswith("Error: ")
        assert "--dt" in err
        assert out == ""

    def test_console_output(self, capsys):
        assert main(["--no-csv"]) == 0
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 121
        assert lines[0] == "[STEAMING] t=1s moisture=0.75 temp=30.6 aroma=10.9 color=10.2"
        assert lines[30].startswith("[ROLLING]  t=31s ")
        assert lines[60].startswith("[DRYING]   t=61s ")
        assert lines[119].startswith("[DRYING]   t=120s ")
        assert lines[120].startswith("[QUALITY] score=")

    def test_large_step_output(self, capsys):
        assert main(["--dt", "120", "--no-csv"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split(" moisture=")[0] for line in lines[:3]] == [
            "[STEAMING] t=30s",
            "[ROLLING]  t=60s",
            "[DRYING]   t=120s",
        ]
        assert len(lines) == 4

    def test_csv_output(self, tmp_path, capsys):
        path = tmp_path / "run.csv"
        assert main(["--csv", str(path)]) == 0

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "process,elapsedSeconds,moisture,temperatureC,aroma,color,qualityScore,qualityStatus"
        assert len(lines) == 121
        assert lines[1].startswith("STEAMING,1,")
        assert lines[-1].startswith("DRYING,120,")

    def test_default_csv_path(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert main(["--dt", "30"]) == 0
        assert (tmp_path / "tea_factory_cli.csv").exists()

    def test_multiple_batches(self, tmp_path, capsys):
        path = tmp_path / "log.csv"
        assert main(["--batches", "2", "--dt", "60", "--csv", str(path)]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert [line[:3] for line in lines] == ["#1 "] * 4 + ["#2 "] * 4
        assert (tmp_path / "log_1.csv").exists()
        assert (tmp_path / "log_2.csv").exists()
        assert not path.exists()

    def test_profile_changes_result(self, capsys):
        main(["--no-csv", "--model", "gentle"])
        gentle = capsys.readouterr().out.splitlines()[-1]
        main(["--no-csv", "--model", "aggressive"])
        aggressive = capsys.readouterr().out.splitlines()[-1]
        assert "model=gentle" in gentle
        assert "model=aggressive" in aggressive
        assert gentle != aggressive


class TestCsvPathFor:
    """Test per-batch CSV naming."""

    def test_single_batch_keeps_path(self):
        assert str(csv_path_for("out.csv", 1, 1)) == "out.csv"

    def test_index_appended_to_stem(self, tmp_path):
        assert csv_path_for(str(tmp_path / "out.csv"), 3, 4) == tmp_path / "out_3.csv"

    def test_path_without_suffix(self):
        assert str(csv_path_for("log", 2, 2)) == "log_2"
