from dataclasses import dataclass

from docverify.exceptions import ValidationError

MIN_SOURCE_CHARS = 50
MAX_BULLETS = 7


@dataclass(frozen=True)
class SummaryRequest:
    """Text to be summarized."""

    source_text: str

    def __post_init__(self) -> None:
        if len((self.source_text or "").strip()) < MIN_SOURCE_CHARS:
            raise ValidationError("Insufficient text for summary")


@dataclass(frozen=True)
class SummaryResult:
    """Bullet points produced by the summarizer, at most MAX_BULLETS."""

    bullets: tuple[str, ...]

    def as_text(self) -> str:
        return "\n".join(self.bullets)
