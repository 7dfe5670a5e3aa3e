"""
Unit tests for the interactive run controller, trend history and run log

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import numpy as np
import pytest
from tea_factory.core.model_params import ModelType
from tea_factory.core.process_state import ProcessState
from tea_factory.modules.batch import TeaBatch
from tea_factory.modules.simulator import RunLog, SimulatorController, TrendHistory


@pytest.fixture
def controller():
    """Fixture providing a stopped single-batch controller."""
    return SimulatorController()


class TestRunControl:
    """Test start/pause/reset behaviour."""

    def test_initially_stopped(self, controller):
        assert not controller.is_running
        assert controller.model_type == ModelType.DEFAULT
        assert len(controller.batches) == 1

    def test_update_ignored_while_stopped(self, controller):
        controller.update(10.0)
        assert controller.batch.elapsed_seconds == 0

    def test_start_and_update(self, controller):
        controller.start()
        assert controller.is_running
        controller.update(1.5)
        assert controller.batch.elapsed_seconds == 1

    def test_pause_stops_time(self, controller):
        controller.start()
        controller.update(5.0)
        controller.pause()
        controller.update(5.0)
        assert not controller.is_running
        assert controller.batch.elapsed_seconds == 5

    def test_auto_stop_when_finished(self, controller):
        controller.start()
        controller.update(500.0)
        assert controller.batch.process == ProcessState.FINISHED
        assert controller.all_finished
        assert not controller.is_running

    def test_start_ignored_when_finished(self, controller):
        controller.start()
        controller.update(500.0)
        controller.start()
        assert not controller.is_running

    def test_reset(self, controller):
        controller.start()
        controller.update(45.0)
        controller.reset()
        assert not controller.is_running
        assert controller.batch.elapsed_seconds == 0
        assert controller.batch.process == ProcessState.STEAMING

    def test_same_total_time_same_state(self):
        """Tick rate of the UI does not change the outcome."""
        fast, slow = SimulatorController(), SimulatorController()
        fast.start()
        slow.start()
        for _ in range(400):
            fast.update(0.1)
        for _ in range(8):
            slow.update(5.0)
        assert fast.batch.elapsed_seconds == slow.batch.elapsed_seconds == 40
        assert fast.batch.aroma == pytest.approx(slow.batch.aroma)
        assert fast.batch.moisture == pytest.approx(slow.batch.moisture)


class TestProfileSelection:
    """Test set_model gating."""

    def test_rejected_while_running(self, controller):
        controller.start()
        controller.update(3.0)
        assert controller.set_model(ModelType.GENTLE) is False
        assert controller.model_type == ModelType.DEFAULT
        assert controller.batch.model_type == ModelType.DEFAULT
        assert controller.batch.elapsed_seconds == 3

    def test_accepted_while_paused(self, controller):
        controller.start()
        controller.update(3.0)
        controller.pause()
        assert controller.set_model(ModelType.AGGRESSIVE) is True
        assert controller.model_type == ModelType.AGGRESSIVE
        assert controller.batch.model_type == ModelType.AGGRESSIVE
        assert controller.batch.elapsed_seconds == 0

    def test_reset_keeps_selected_profile(self, controller):
        controller.set_model(ModelType.GENTLE)
        controller.reset()
        assert controller.batch.model_type == ModelType.GENTLE


class TestMultipleBatches:
    """Test driving several batches together."""

    def test_batches_advance_together(self):
        controller = SimulatorController(batch_count=3, model_type=ModelType.GENTLE)
        controller.start()
        controller.update(42.0)
        assert [b.elapsed_seconds for b in controller.batches] == [42, 42, 42]
        assert all(b.model_type == ModelType.GENTLE for b in controller.batches)

    def test_batches_are_independent_objects(self):
        controller = SimulatorController(batch_count=2)
        first, second = controller.batches
        assert first is not second

    def test_batches_list_is_a_copy(self, controller):
        controller.batches.clear()
        assert len(controller.batches) == 1

    @pytest.mark.parametrize("count", [0, 17, -1])
    def test_invalid_batch_count(self, count):
        with pytest.raises(ValueError):
            SimulatorController(batch_count=count)

    def test_configuration(self):
        controller = SimulatorController(batch_count=2, model_type=ModelType.AGGRESSIVE)
        config = controller.get_configuration()
        assert config["batch_count"] == 2
        assert config["model"] == "aggressive"


class TestTrendHistory:
    """Test trend history ring buffers."""

    def setup_method(self):
        self.batch = TeaBatch()

    def test_records_only_when_time_moves(self):
        history = TrendHistory()
        assert history.record(self.batch.snapshot())
        assert not history.record(self.batch.snapshot())
        self.batch.update(1)
        assert history.record(self.batch.snapshot())
        assert len(history) == 2

    def test_arrays(self):
        history = TrendHistory()
        for _ in range(5):
            self.batch.update(1)
            history.record(self.batch.snapshot())

        data = history.as_arrays()
        assert isinstance(data["elapsed"], np.ndarray)
        np.testing.assert_array_equal(data["elapsed"], [1.0, 2.0, 3.0, 4.0, 5.0])
        assert data["moisture"][-1] == pytest.approx(self.batch.moisture)
        assert all(len(values) == 5 for values in data.values())

    def test_capacity_keeps_latest(self):
        history = TrendHistory(capacity=3)
        for _ in range(10):
            self.batch.update(1)
            history.record(self.batch.snapshot())

        np.testing.assert_array_equal(history.as_arrays()["elapsed"], [8.0, 9.0, 10.0])

    def test_clear(self):
        history = TrendHistory()
        history.record(self.batch.snapshot())
        history.clear()
        assert len(history) == 0
        assert history.record(self.batch.snapshot())

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            TrendHistory(capacity=0)


class TestRunLog:
    """Test the dashboard CSV log of one run."""

    def setup_method(self):
        self.batch = TeaBatch()

    def read_lines(self, path):
        return path.read_text(encoding="utf-8").splitlines()

    def test_rows_only_when_time_moves(self, tmp_path):
        path = tmp_path / "run.csv"
        log = RunLog(path)
        log.open()
        assert log.record(self.batch.snapshot())
        assert not log.record(self.batch.snapshot())
        self.batch.update(1)
        assert log.record(self.batch.snapshot())
        log.close()

        lines = self.read_lines(path)
        assert lines[0].startswith("process,elapsedSeconds")
        assert [line.split(",")[1] for line in lines[1:]] == ["0", "1"]

    def test_closed_log_ignores_records(self, tmp_path):
        log = RunLog(tmp_path / "run.csv")
        assert not log.is_open
        assert not log.record(self.batch.snapshot())
        assert not (tmp_path / "run.csv").exists()

    def test_open_is_once_per_run(self, tmp_path):
        """Start after Pause keeps appending to the same file."""
        path = tmp_path / "run.csv"
        log = RunLog(path)
        log.open()
        self.batch.update(1)
        log.record(self.batch.snapshot())
        log.open()
        self.batch.update(1)
        log.record(self.batch.snapshot())
        log.close()

        lines = self.read_lines(path)
        assert lines.count(lines[0]) == 1
        assert len(lines) == 3

    def test_profile_switch_starts_new_log(self, tmp_path):
        """After a profile switch the next Start logs the reset batch afresh."""
        path = tmp_path / "run.csv"
        controller = SimulatorController()
        log = RunLog(path)

        controller.start()
        log.open()
        for _ in range(3):
            controller.update(1.0)
            log.record(controller.batch.snapshot())
        controller.pause()

        assert controller.set_model(ModelType.AGGRESSIVE)
        log.close()
        assert not log.is_open

        controller.start()
        log.open()
        log.record(controller.batch.snapshot())
        controller.update(1.0)
        log.record(controller.batch.snapshot())
        log.close()

        lines = self.read_lines(path)
        assert len(lines) == 3
        assert lines[0].startswith("process,")
        assert [line.split(",")[1] for line in lines[1:]] == ["0", "1"]
