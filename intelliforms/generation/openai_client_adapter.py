import httpx
import openai

from intelliforms.generation.client_base import BaseGenerationClient
from intelliforms.generation.exceptions import (
    ContentBlocked,
    GenerationError,
    InvalidApiKey,
    QuotaExceeded,
)

_INVALID_KEY_MARKERS = ("API_KEY_INVALID", "API key not valid")
_QUOTA_MARKERS = ("QUOTA_EXCEEDED", "RESOURCE_EXHAUSTED", "insufficient_quota")
_SAFETY_MARKERS = ("SAFETY", "content_filter")


def classify_provider_error(exc: Exception) -> GenerationError:
    """Map a provider exception onto the generation error taxonomy.

    Status codes are checked first; message markers are a fallback for
    providers that report everything as a generic 400.
    """
    status = getattr(exc, "status_code", None)
    if isinstance(exc, openai.AuthenticationError) or status in (401, 403):
        return InvalidApiKey("The AI provider API key is not valid")
    if isinstance(exc, openai.RateLimitError) or status == 429:
        return QuotaExceeded("The AI provider quota has been exceeded")

    text = f"{exc} {getattr(exc, 'body', '') or ''}"
    if any(marker in text for marker in _INVALID_KEY_MARKERS):
        return InvalidApiKey("The AI provider API key is not valid")
    if any(marker in text for marker in _QUOTA_MARKERS):
        return QuotaExceeded("The AI provider quota has been exceeded")
    if any(marker in text for marker in _SAFETY_MARKERS):
        return ContentBlocked(
            "The content was blocked by the AI provider safety policies"
        )
    return GenerationError(f"Error generating the form: {exc}")


class OpenAIClientAdapter(BaseGenerationClient):
    """Generation client built on the OpenAI-compatible chat API.

    Retries are disabled: every failure surfaces to the caller at once.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        messages = [{"role": "user", "content": user_prompt}]
        if system_prompt:
            messages.insert(0, {"role": "system", "content": system_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "form_spec",
                        "schema": json_schema,
                    },
                },
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise classify_provider_error(exc) from exc

        if not response.choices:
            raise GenerationError("AI returned no choices")
        choice = response.choices[0]
        if choice.finish_reason == "content_filter":
            raise ContentBlocked(
                "The content was blocked by the AI provider safety policies"
            )
        content = choice.message.content
        if content is None:
            raise GenerationError("AI returned empty response")
        return content
