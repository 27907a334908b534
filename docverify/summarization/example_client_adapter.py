"""Offline completion client.

Selected with ``SUMMARY_PROVIDER=example``. Handy for local development
without a completion-service key, and as a template for new provider adapters:
implement BaseCompletionClient and register the provider in SummarizerFactory.
"""

from typing import ClassVar

from docverify.summarization.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Returns a fixed bulleted summary without any network call."""

    DEFAULT_RESPONSE: ClassVar[str] = "\n".join(
        [
            "- The document states its research question in the introduction.",
            "- The method section describes the data and how it was collected.",
            "- Results are reported against a stated baseline.",
            "- The discussion relates findings to prior work.",
            "- Limitations and future work are listed at the end.",
        ]
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return self._response
