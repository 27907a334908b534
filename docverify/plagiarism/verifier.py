import threading
import time
from collections.abc import Callable

from docverify.logging.logger import Log
from docverify.plagiarism.client import PlagiarismCheckClient
from docverify.plagiarism.exceptions import (
    CheckCancelledError,
    CheckFailedError,
    CheckTimeoutError,
)
from docverify.plagiarism.models import (
    JobState,
    PlagiarismJob,
    PlagiarismReport,
    build_external_id,
)

StateCallback = Callable[[PlagiarismJob], None]


class PlagiarismVerifier:
    """Drives a check through submit -> poll -> report.

    Polling waits on the cancel event between requests, so a caller can abort
    at any point. The loop ends after ``max_polls`` requests or once
    ``check_timeout_seconds`` have elapsed since submission, whichever is first.
    """

    def __init__(
        self,
        client: PlagiarismCheckClient,
        *,
        poll_interval_seconds: float = 2.0,
        max_polls: int = 150,
        check_timeout_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_polls < 1:
            raise ValueError("max_polls must be at least 1")
        self._client = client
        self._poll_interval = poll_interval_seconds
        self._max_polls = max_polls
        self._check_timeout = check_timeout_seconds
        self._clock = clock

    def submit(self, text: str, filename: str) -> PlagiarismJob:
        external_id = build_external_id(filename)
        remote_id = self._client.submit(text, external_id)
        return PlagiarismJob(external_id=external_id, remote_id=remote_id)

    def wait_until_checked(
        self,
        job: PlagiarismJob,
        cancel_event: threading.Event | None = None,
        on_state: StateCallback | None = None,
    ) -> PlagiarismJob:
        """Poll until the job reaches a terminal state.

        Raises:
            CheckFailedError: the service reported FAILED.
            CheckTimeoutError: poll bound or deadline exceeded.
            CheckCancelledError: ``cancel_event`` was set.
        """
        cancel_event = cancel_event or threading.Event()
        deadline = self._clock() + self._check_timeout
        polls = 0

        while polls < self._max_polls:
            remaining = deadline - self._clock()
            if remaining <= 0:
                break
            if cancel_event.wait(min(self._poll_interval, remaining)):
                raise CheckCancelledError(f"Check of text {job.remote_id} was cancelled")
            if self._clock() >= deadline:
                break

            previous = job.state
            job.advance(self._client.poll(job.remote_id))
            polls += 1
            if job.state is not previous and on_state is not None:
                on_state(job)

            if job.state is JobState.CHECKED:
                Log.info(f"Text {job.remote_id} checked after {polls} polls")
                return job
            if job.state is JobState.FAILED:
                raise CheckFailedError(f"Detection service failed to check text {job.remote_id}")

        raise CheckTimeoutError(
            f"Text {job.remote_id} still {job.state.value} after "
            f"{polls} polls ({self._check_timeout}s deadline)"
        )

    def fetch_report(self, job: PlagiarismJob) -> PlagiarismReport:
        if job.state is not JobState.CHECKED:
            raise ValueError(f"Report requested for text {job.remote_id} in state {job.state.value}")
        report = self._client.fetch_report(job.remote_id)
        Log.info(
            f"Text {job.remote_id}: {report.percent}% similarity, {report.source_count} sources"
        )
        return report

    def close(self) -> None:
        self._client.close()

    def verify(
        self,
        text: str,
        filename: str,
        cancel_event: threading.Event | None = None,
        on_state: StateCallback | None = None,
    ) -> tuple[PlagiarismJob, PlagiarismReport]:
        """Run the whole check for one text."""
        job = self.submit(text, filename)
        if on_state is not None:
            on_state(job)
        self.wait_until_checked(job, cancel_event, on_state)
        return job, self.fetch_report(job)
