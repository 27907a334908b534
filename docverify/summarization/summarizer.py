"""AI-powered bullet summarizer."""

import re
from pathlib import Path

from docverify.logging.logger import Log
from docverify.summarization.client_base import BaseCompletionClient
from docverify.summarization.exceptions import EmptyCompletionError
from docverify.summarization.models import MAX_BULLETS, SummaryRequest, SummaryResult
from docverify.summarization.prompt_loader import load_prompt

_BULLET_SPLIT = re.compile(r"\n|•")
_BULLET_MARKER = re.compile(r"^[-*](\s+|$)")


class Summarizer:
    """Summarizes text into at most MAX_BULLETS bullet points."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.5,
        max_tokens: int = 500,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tokens = max_tokens
        self._system_prompt = load_prompt("summary_system_prompt.txt", prompt_dir).strip()
        self._user_template = load_prompt("summary_user_prompt.txt", prompt_dir)

    def summarize(self, text: str) -> SummaryResult:
        """Summarize ``text``.

        Raises:
            ValidationError: if the text is shorter than the minimum, before any call.
            AuthError: if the completion client has no credential.
            EmptyCompletionError: if the model returned nothing usable.
        """
        request = SummaryRequest(source_text=text)
        user_prompt = self._user_template.format(source_text=request.source_text.strip()).strip()
        Log.debug(f"Summary prompt:\n{user_prompt}")

        raw = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=user_prompt,
        )
        Log.debug(f"Completion raw response:\n{raw}")

        bullets = parse_bullets(raw)
        if not bullets:
            raise EmptyCompletionError("Completion contained no bullet points")
        Log.info(f"Summary complete: {len(bullets)} bullets")
        return SummaryResult(bullets=bullets)


def parse_bullets(raw: str) -> tuple[str, ...]:
    """Split raw model output into clean bullet strings.

    Code-fence lines are dropped, the text is split on newlines and bullet
    glyphs, list markers are stripped and blank entries discarded.
    """
    lines = [line for line in raw.splitlines() if not line.strip().startswith("```")]
    bullets = []
    for part in _BULLET_SPLIT.split("\n".join(lines)):
        cleaned = _BULLET_MARKER.sub("", part.strip()).strip()
        if cleaned:
            bullets.append(cleaned)
    return tuple(bullets[:MAX_BULLETS])
