from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.exceptions import ExtractionError


class PlainTextReader(BaseDocumentReader):
    """Decodes plain text files as UTF-8, verbatim."""

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"Text file is not valid UTF-8: {exc}") from exc
