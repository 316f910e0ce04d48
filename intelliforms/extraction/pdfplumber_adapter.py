import io

import pdfplumber

from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.exceptions import PdfExtractionError


class PdfPlumberAdapter(BaseDocumentReader):
    """Reads the PDF text layer with pdfplumber."""

    def extract(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
