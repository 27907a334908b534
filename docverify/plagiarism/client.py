"""HTTP client for the plagiarismcheck.org text API."""

from typing import Any

import httpx

from docverify.exceptions import AuthError, UpstreamError
from docverify.logging.logger import Log
from docverify.plagiarism.exceptions import ReportUnavailableError, SubmissionError
from docverify.plagiarism.models import JobState, PlagiarismReport, state_from_remote

DEFAULT_BASE_URL = "https://plagiarismcheck.org/api/v1"


class PlagiarismCheckClient:
    """Submit text, read check state and fetch the final report.

    Every method performs exactly one HTTP request. Nothing is cached between
    calls; the remote id returned by ``submit`` is the only key needed later.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._http = httpx.Client(
            base_url=base_url,
            headers={"X-API-TOKEN": api_key},
            timeout=timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> "PlagiarismCheckClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def submit(self, text: str, external_id: str) -> str:
        """Submit text for checking and return the service's record id.

        Raises:
            AuthError: if no API key is configured.
            SubmissionError: if the response carries no record id.
            UpstreamError: on transport failure.
        """
        if not self._api_key:
            raise AuthError("PLAGCHECK_API_KEY is not configured")

        response = self._request(
            "POST",
            "/text",
            data={
                "language": "en",
                "is_private": "1",
                "type": "single",
                "external_id": external_id,
                "text": text,
            },
        )
        payload = _json_or_none(response)
        remote_id = _dig(payload, "data", "text", "id")
        if remote_id is None or remote_id == "":
            Log.warning(
                f"Submission {external_id} rejected: HTTP {response.status_code} {response.text[:500]}"
            )
            raise SubmissionError(
                f"Detection service returned no text id (HTTP {response.status_code})"
            )
        Log.info(f"Submitted {external_id} as text {remote_id}")
        return str(remote_id)

    def poll(self, remote_id: str) -> JobState:
        """Read the current state of a submitted text."""
        response = self._request("GET", f"/text/{remote_id}")
        if response.is_error:
            raise UpstreamError(
                f"Status request for text {remote_id} failed with HTTP {response.status_code}"
            )
        payload = _json_or_none(response)
        if payload is None:
            raise UpstreamError(f"Status response for text {remote_id} is not JSON")
        code = _dig(payload, "data", "state")
        state = state_from_remote(code)
        Log.debug(f"Text {remote_id} remote state {code!r} -> {state.value}")
        return state

    def fetch_report(self, remote_id: str) -> PlagiarismReport:
        """Fetch the report of a checked text.

        Raises:
            ReportUnavailableError: if the body lacks a usable report.
        """
        response = self._request("GET", f"/text/report/{remote_id}")
        report = _dig(_json_or_none(response), "data", "report")
        if response.is_error or not isinstance(report, dict):
            raise ReportUnavailableError(
                f"No report for text {remote_id} (HTTP {response.status_code})"
            )
        try:
            percent = _as_number(report["percent"])
            source_count = int(_as_number(report["source_count"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ReportUnavailableError(f"Malformed report for text {remote_id}: {exc}") from exc
        if not 0 <= percent <= 100:
            raise ReportUnavailableError(
                f"Report for text {remote_id} has percent out of range: {percent}"
            )
        return PlagiarismReport(percent=percent, source_count=source_count)

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Detection service {method} {url} failed: {exc}") from exc


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _dig(payload: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(payload, dict):
            return None
        payload = payload.get(key)
    return payload


def _as_number(value: Any) -> float | int:
    if isinstance(value, bool):
        raise TypeError("boolean is not a number")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return float(value)
    raise TypeError(f"expected a number, got {type(value).__name__}")
