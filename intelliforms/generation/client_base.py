from abc import ABC, abstractmethod


class BaseGenerationClient(ABC):
    """Contract for provider-specific generative AI clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return provider response as plain text.

        Raises:
            GenerationError: or one of its provider subclasses on failure.
        """
