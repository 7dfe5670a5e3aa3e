"""Manufacturing stages of the tea pipeline."""

from enum import Enum


class ProcessState(Enum):
    """
    Stage of the pipeline: STEAMING -> ROLLING -> DRYING -> FINISHED.

    FINISHED is terminal, no stage rule runs in it.
    """
    STEAMING = "STEAMING"
    ROLLING = "ROLLING"
    DRYING = "DRYING"
    FINISHED = "FINISHED"

    def __str__(self) -> str:
        return self.value

    def next(self) -> "ProcessState":
        """Return the following stage (FINISHED stays FINISHED)."""
        return _NEXT_STATE[self]


# Linear order of the working stages
PROCESS_SEQUENCE = (
    ProcessState.STEAMING,
    ProcessState.ROLLING,
    ProcessState.DRYING,
)

_NEXT_STATE = {
    ProcessState.STEAMING: ProcessState.ROLLING,
    ProcessState.ROLLING: ProcessState.DRYING,
    ProcessState.DRYING: ProcessState.FINISHED,
    ProcessState.FINISHED: ProcessState.FINISHED,
}
