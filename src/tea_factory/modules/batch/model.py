"""
TeaBatch Model - Stage sequencer of one batch

Owns the leaf state vector and drives it through
STEAMING -> ROLLING -> DRYING -> FINISHED with the configured stage
durations. Two drivers share it:

- step(dt): fixed-step driver of the CLI, one rule application per call,
  never crossing a stage boundary.
- update(delta): continuous-time driver of the dashboard. Fractional
  seconds are accumulated and only whole seconds are simulated, one rule
  application per second, so the trajectory does not depend on how the
  total time was split between calls.

The quality score is frozen the first time the batch reaches FINISHED.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass
import logging
import math
from typing import Dict, Optional, Set

from tea_factory.core.config import SimulationConfig
from tea_factory.core.model_params import ModelType, make_model
from tea_factory.core.process_state import ProcessState
from tea_factory.core.quality import QualityStatus, quality_score, quality_status
from tea_factory.core.tea_leaf import TeaLeaf, normalize
from tea_factory.modules.stages import build_stage_controller


logger = logging.getLogger(__name__)

# Absorbs summation error of fractional deltas (10 x 0.1 s == 1 s)
UPDATE_EPSILON = 1e-9

# Rule step used by update() [s]
UNIT_TICK_SECONDS = 1


@dataclass(frozen=True)
class BatchSnapshot:
    """
    Read-only view of a batch at one instant.

    Attributes:
        process: Current stage
        elapsed_seconds: Total simulated time [s]
        moisture: Moisture ratio [-]
        temperature_c: Leaf temperature [°C]
        aroma: Aroma index [-]
        color: Color index [-]
        quality_score: Score computed from this instantaneous state
        quality_status: Classification of quality_score
        model_type: Active coefficient profile
    """
    process: ProcessState
    elapsed_seconds: int
    moisture: float
    temperature_c: float
    aroma: float
    color: float
    quality_score: float
    quality_status: QualityStatus
    model_type: ModelType


class TeaBatch:
    """
    Stage sequencer of one tea batch.

    Attributes:
        config: Stage durations and default profile (read-only input)
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        model_type: Optional[ModelType] = None,
    ):
        """
        Initialize batch at its initial state.

        Args:
            config: Run configuration (defaults: 30 s / 30 s / 60 s)
            model_type: Coefficient profile, overrides config.model
        """
        self.config = config if config is not None else SimulationConfig()
        self._model_type = model_type if model_type is not None else self.config.model
        self._params = make_model(self._model_type)
        self._initial_leaf = TeaLeaf()
        self.reset()

    # ========== Lifecycle ==========

    def reset(self) -> None:
        """Restore the initial leaf and restart at STEAMING."""
        self._leaf = self._initial_leaf.copy()
        normalize(self._leaf)

        self._process = ProcessState.STEAMING
        self._stage_remaining = self.stage_duration(self._process)
        self._elapsed = 0
        self._accumulator = 0.0

        self._final_score = 0.0
        self._final_committed = False

        self._stage_controller = build_stage_controller(self._process, self._params)
        self._raised_flags: Set[str] = set()

    def set_initial_leaf(self, leaf: TeaLeaf) -> None:
        """
        Replace the initial state vector and the current one.

        Args:
            leaf: Initial state, normalized on copy
        """
        self._initial_leaf = leaf.copy()
        normalize(self._initial_leaf)
        self._leaf = self._initial_leaf.copy()

    def set_model(self, model_type: ModelType) -> None:
        """
        Switch coefficient profile.

        Only the active stage's rule is rebuilt; stage, elapsed and
        remaining time are kept as they are.

        Args:
            model_type: New profile
        """
        self._model_type = model_type
        self._params = make_model(model_type)
        self._stage_controller = build_stage_controller(self._process, self._params)
        logger.debug("Profile switched to %s during %s at t=%ds",
                     model_type, self._process, self._elapsed)

    def stage_duration(self, state: ProcessState) -> int:
        """
        Configured duration of a stage.

        Args:
            state: Stage tag

        Returns:
            Duration [s], 0 for FINISHED
        """
        durations = {
            ProcessState.STEAMING: self.config.steaming_seconds,
            ProcessState.ROLLING: self.config.rolling_seconds,
            ProcessState.DRYING: self.config.drying_seconds,
        }
        return durations.get(state, 0)

    # ========== Drivers ==========

    def step(self, dt_seconds: int) -> bool:
        """
        Advance by one step of at most dt_seconds.

        The step is shortened to the remaining time of the current stage so
        a large dt never applies one stage's rule past its boundary.

        Args:
            dt_seconds: Requested step [s]

        Returns:
            True if a rule was applied, False if dt_seconds is shorter than
            one second (or not finite) or the batch is (or just became)
            FINISHED
        """
        if not math.isfinite(dt_seconds) or int(dt_seconds) <= 0:
            return False
        if not self._advance_if_exhausted():
            return False

        dt = min(int(dt_seconds), self._stage_remaining)
        self._apply_rule(dt)
        self._elapsed += dt
        self._stage_remaining -= dt
        return True

    def update(self, delta_seconds: float) -> None:
        """
        Advance by a wall-clock delta.

        Whole seconds are simulated as soon as they are accumulated; time
        beyond the end of DRYING is discarded.

        Args:
            delta_seconds: Elapsed time [s]; non-positive and non-finite
                values are ignored
        """
        if not math.isfinite(delta_seconds) or delta_seconds <= 0:
            return
        if self._process == ProcessState.FINISHED:
            return

        self._accumulator += delta_seconds
        whole = int(math.floor(self._accumulator + UPDATE_EPSILON))
        if whole <= 0:
            return
        self._accumulator = max(0.0, self._accumulator - whole)

        while whole > 0:
            if not self._advance_if_exhausted():
                break
            chunk = min(whole, self._stage_remaining)
            for _ in range(chunk):
                self._apply_rule(UNIT_TICK_SECONDS)
                self._elapsed += UNIT_TICK_SECONDS
                self._stage_remaining -= UNIT_TICK_SECONDS
            whole -= chunk

        self._advance_if_exhausted()
        if self._process == ProcessState.FINISHED:
            self._accumulator = 0.0

    def _apply_rule(self, dt: int) -> None:
        """
        Apply the active stage rule for dt seconds.

        Diagnostic flags of the rule (saturation, depletion, overheat) are
        logged the first time they are raised within a stage.
        """
        result = self._stage_controller.apply_step(self._leaf, dt)
        raised = {name for name, on in result.flags.items() if on} - self._raised_flags
        for name in sorted(raised):
            logger.debug("%s: %s at t=%ds", self._process, name, self._elapsed + dt)
        self._raised_flags |= raised

    def _advance_if_exhausted(self) -> bool:
        """
        Move past every exhausted stage.

        Returns:
            False once the batch is FINISHED
        """
        while self._process != ProcessState.FINISHED and self._stage_remaining <= 0:
            previous = self._process
            self._process = previous.next()
            self._stage_remaining = self.stage_duration(self._process)
            self._stage_controller = build_stage_controller(self._process, self._params)
            logger.debug("Stage %s -> %s at t=%ds", previous, self._process, self._elapsed)
            self._raised_flags.clear()

            if self._process == ProcessState.FINISHED:
                self._commit_final_quality()

        return self._process != ProcessState.FINISHED

    def _commit_final_quality(self) -> None:
        """Freeze the quality score on the first transition into FINISHED."""
        if self._final_committed:
            return
        self._final_score = quality_score(
            self._leaf.moisture, self._leaf.aroma, self._leaf.color
        )
        self._final_committed = True
        logger.info("Batch finished at t=%ds: score=%.2f (%s)",
                    self._elapsed, self._final_score, quality_status(self._final_score))

    # ========== Accessors ==========

    @property
    def process(self) -> ProcessState:
        return self._process

    @property
    def is_finished(self) -> bool:
        return self._process == ProcessState.FINISHED

    @property
    def model_type(self) -> ModelType:
        return self._model_type

    @property
    def leaf(self) -> TeaLeaf:
        """Copy of the current state vector."""
        return self._leaf.copy()

    @property
    def moisture(self) -> float:
        return self._leaf.moisture

    @property
    def temperature_c(self) -> float:
        return self._leaf.temperature_c

    @property
    def aroma(self) -> float:
        return self._leaf.aroma

    @property
    def color(self) -> float:
        return self._leaf.color

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    @property
    def stage_remaining_seconds(self) -> int:
        return self._stage_remaining if not self.is_finished else 0

    @property
    def total_duration_seconds(self) -> int:
        return self.config.total_seconds

    @property
    def final_quality_score(self) -> Optional[float]:
        """Memoized score, None until the batch has finished."""
        return self._final_score if self._final_committed else None

    @property
    def quality_score(self) -> float:
        """Memoized score once FINISHED, otherwise the current score."""
        if self._final_committed:
            return self._final_score
        return quality_score(self._leaf.moisture, self._leaf.aroma, self._leaf.color)

    @property
    def quality_status(self) -> QualityStatus:
        return quality_status(self.quality_score)

    def snapshot(self) -> BatchSnapshot:
        """Capture the current state for logging and display."""
        score = quality_score(self._leaf.moisture, self._leaf.aroma, self._leaf.color)
        return BatchSnapshot(
            process=self._process,
            elapsed_seconds=self._elapsed,
            moisture=self._leaf.moisture,
            temperature_c=self._leaf.temperature_c,
            aroma=self._leaf.aroma,
            color=self._leaf.color,
            quality_score=score,
            quality_status=quality_status(score),
            model_type=self._model_type,
        )

    def to_dict(self) -> Dict[str, object]:
        """Export the batch state as a plain dictionary."""
        return {
            "process": self._process.value,
            "elapsed_seconds": self._elapsed,
            "stage_remaining_seconds": self.stage_remaining_seconds,
            "model": self._model_type.value,
            **self._leaf.to_dict(),
            "quality_score": self.quality_score,
            "quality_status": self.quality_status.value,
        }
