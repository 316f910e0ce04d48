from abc import ABC, abstractmethod


class BaseDocumentReader(ABC):
    """Contract for all format-specific text readers."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text. An empty string is a valid result.

        Raises:
            ExtractionError: if the content cannot be parsed.
        """
