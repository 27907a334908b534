import httpx
import openai

from docverify.exceptions import AuthError, UpstreamError
from docverify.summarization.client_base import BaseCompletionClient
from docverify.summarization.exceptions import EmptyCompletionError


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client: openai.OpenAI | None = None
        if api_key:
            self._client = openai.OpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
            )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        if self._client is None:
            raise AuthError("Completion service API key is not configured")
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise UpstreamError(f"Completion service network error: {exc}") from exc
        except openai.APIError as exc:
            raise UpstreamError(f"Completion service API error: {exc}") from exc

        if not response.choices:
            raise EmptyCompletionError("Completion service returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise EmptyCompletionError("Completion service returned empty content")
        return content
