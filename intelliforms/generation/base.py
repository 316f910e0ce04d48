from abc import ABC, abstractmethod

from intelliforms.generation.models import FormSpec


class BaseFormGenerator(ABC):
    """Contract for all form generators."""

    @abstractmethod
    def generate(self, text: str, template_id: str) -> FormSpec:
        """Turn extracted document text into a validated form description.

        Args:
            text: Extracted text, already truncated to the context budget.
            template_id: Presentation template chosen by the user.

        Returns:
            A fully validated FormSpec.

        Raises:
            GenerationError: or one of its subclasses on any failure.
        """
