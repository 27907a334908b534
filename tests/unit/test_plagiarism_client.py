from urllib.parse import parse_qs

import httpx
import pytest

from docverify.exceptions import AuthError, UpstreamError
from docverify.plagiarism.client import PlagiarismCheckClient
from docverify.plagiarism.exceptions import ReportUnavailableError, SubmissionError
from docverify.plagiarism.models import JobState, PlagiarismReport
from tests.helpers import FakeDetectionService


def _client(transport: httpx.BaseTransport, api_key: str = "secret") -> PlagiarismCheckClient:
    return PlagiarismCheckClient(
        api_key=api_key,
        base_url="https://detector.test/api/v1",
        transport=transport,
    )


def _respond(response: httpx.Response) -> httpx.MockTransport:
    return httpx.MockTransport(lambda request: response)


class TestSubmit:
    def test_posts_form_and_returns_id(self) -> None:
        service = FakeDetectionService(text_id=77)
        with _client(service.transport()) as client:
            remote_id = client.submit("some text", "essay_pdf_1")

        assert remote_id == "77"
        request = service.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/text"
        assert request.headers["X-API-TOKEN"] == "secret"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        form = parse_qs(request.content.decode())
        assert form == {
            "language": ["en"],
            "is_private": ["1"],
            "type": ["single"],
            "external_id": ["essay_pdf_1"],
            "text": ["some text"],
        }

    def test_missing_key_raises_auth_error_without_request(self) -> None:
        service = FakeDetectionService()
        with _client(service.transport(), api_key="") as client:
            with pytest.raises(AuthError):
                client.submit("text", "id")
        assert service.requests == []

    @pytest.mark.parametrize(
        "payload",
        [
            {"success": False, "message": "Invalid token"},
            {"data": {"text": {}}},
            {"data": None},
            ["unexpected"],
        ],
    )
    def test_missing_id_raises_submission_error(self, payload: object) -> None:
        with _client(_respond(httpx.Response(200, json=payload))) as client:
            with pytest.raises(SubmissionError):
                client.submit("text", "id")

    def test_non_json_raises_submission_error(self) -> None:
        with _client(_respond(httpx.Response(502, text="<html>Bad gateway</html>"))) as client:
            with pytest.raises(SubmissionError, match="HTTP 502"):
                client.submit("text", "id")

    def test_transport_failure_raises_upstream_error(self) -> None:
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(httpx.MockTransport(fail)) as client:
            with pytest.raises(UpstreamError, match="connection refused"):
                client.submit("text", "id")


class TestPoll:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [(5, JobState.CHECKED), (4, JobState.FAILED), (2, JobState.CHECKING), (None, JobState.CHECKING)],
    )
    def test_maps_remote_state(self, code: object, expected: JobState) -> None:
        service = FakeDetectionService(states=[code], text_id=9)  # type: ignore[list-item]
        with _client(service.transport()) as client:
            assert client.poll("9") is expected
        assert service.requests[0].method == "GET"
        assert service.requests[0].url.path == "/api/v1/text/9"

    def test_http_error_raises_upstream_error(self) -> None:
        with _client(_respond(httpx.Response(500, json={"message": "boom"}))) as client:
            with pytest.raises(UpstreamError, match="HTTP 500"):
                client.poll("9")

    def test_non_json_raises_upstream_error(self) -> None:
        with _client(_respond(httpx.Response(200, text="maintenance"))) as client:
            with pytest.raises(UpstreamError, match="not JSON"):
                client.poll("9")

    def test_timeout_raises_upstream_error(self) -> None:
        def slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(httpx.MockTransport(slow)) as client:
            with pytest.raises(UpstreamError):
                client.poll("9")


class TestFetchReport:
    def test_returns_report(self) -> None:
        service = FakeDetectionService(report={"percent": 12, "source_count": 3}, text_id=9)
        with _client(service.transport()) as client:
            report = client.fetch_report("9")
        assert report == PlagiarismReport(percent=12, source_count=3)
        assert service.requests[0].url.path == "/api/v1/text/report/9"

    def test_accepts_numeric_strings(self) -> None:
        service = FakeDetectionService(report={"percent": "37.5", "source_count": "4"}, text_id=9)
        with _client(service.transport()) as client:
            report = client.fetch_report("9")
        assert report.percent == 37.5
        assert report.source_count == 4

    def test_repeated_fetches_are_identical(self) -> None:
        service = FakeDetectionService(report={"percent": 12, "source_count": 3}, text_id=9)
        with _client(service.transport()) as client:
            reports = [client.fetch_report("9") for _ in range(3)]
        assert len(set(reports)) == 1

    @pytest.mark.parametrize(
        "report",
        [
            {},
            {"percent": 10},
            {"percent": None, "source_count": 1},
            {"percent": True, "source_count": 1},
            {"percent": "lots", "source_count": 1},
            {"percent": 140, "source_count": 1},
        ],
    )
    def test_malformed_report_raises(self, report: dict[str, object]) -> None:
        service = FakeDetectionService(report=report, text_id=9)
        with _client(service.transport()) as client:
            with pytest.raises(ReportUnavailableError):
                client.fetch_report("9")

    def test_missing_report_body_raises(self) -> None:
        with _client(_respond(httpx.Response(200, json={"data": {}}))) as client:
            with pytest.raises(ReportUnavailableError):
                client.fetch_report("9")

    def test_http_error_raises(self) -> None:
        with _client(_respond(httpx.Response(404, json={"message": "no report"}))) as client:
            with pytest.raises(ReportUnavailableError, match="HTTP 404"):
                client.fetch_report("9")
