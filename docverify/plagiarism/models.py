import re
import time
from dataclasses import dataclass
from enum import Enum

from docverify.plagiarism.exceptions import InvalidStateTransitionError


class JobState(str, Enum):
    SUBMITTED = "submitted"
    CHECKING = "checking"
    CHECKED = "checked"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobState.CHECKED, JobState.FAILED)


_STATE_RANK = {
    JobState.SUBMITTED: 0,
    JobState.CHECKING: 1,
    JobState.CHECKED: 2,
    JobState.FAILED: 2,
}

# numeric states reported by the detection service
REMOTE_STATE_CHECKED = 5
REMOTE_STATE_FAILED = 4


def state_from_remote(code: object) -> JobState:
    """Map the service's numeric state onto JobState."""
    if code == REMOTE_STATE_CHECKED:
        return JobState.CHECKED
    if code == REMOTE_STATE_FAILED:
        return JobState.FAILED
    return JobState.CHECKING


def build_external_id(filename: str, timestamp_ms: int | None = None) -> str:
    """Build a per-submission id from the sanitized filename and a timestamp."""
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    safe_name = re.sub(r"\W+", "_", filename)
    return f"{safe_name}_{timestamp_ms}"


@dataclass
class PlagiarismJob:
    """A text submitted to the detection service and its current state."""

    external_id: str
    remote_id: str
    state: JobState = JobState.SUBMITTED

    def advance(self, new_state: JobState) -> None:
        """Move to ``new_state``; transitions only ever go forward."""
        if self.state.is_terminal and new_state is not self.state:
            raise InvalidStateTransitionError(
                f"Job {self.remote_id} is {self.state.value}, cannot move to {new_state.value}"
            )
        if _STATE_RANK[new_state] < _STATE_RANK[self.state]:
            raise InvalidStateTransitionError(
                f"Job {self.remote_id} cannot go back from "
                f"{self.state.value} to {new_state.value}"
            )
        self.state = new_state


@dataclass(frozen=True)
class PlagiarismReport:
    """Final score for a checked job."""

    percent: float
    source_count: int
