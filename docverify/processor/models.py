from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PipelineStage(str, Enum):
    """Stages reported to progress listeners as they actually complete."""

    EXTRACTED = "extracted"
    SUBMITTED = "submitted"
    CHECKING = "checking"
    CHECKED = "checked"
    REPORTED = "reported"


@dataclass(frozen=True)
class VerificationResult:
    percent: float
    source_count: int
    remote_id: str
    extracted_text: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "percent": self.percent,
            "sourceCount": self.source_count,
            "remoteId": self.remote_id,
            "extractedText": self.extracted_text,
        }


@dataclass(frozen=True)
class PipelineResponse:
    """Caller-facing outcome: an HTTP-style status and a JSON-ready body."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @classmethod
    def error(cls, status_code: int, message: str) -> "PipelineResponse":
        return cls(status_code=status_code, body={"error": message})
