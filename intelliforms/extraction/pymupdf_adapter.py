import pymupdf

from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.exceptions import PdfExtractionError


class PyMuPdfAdapter(BaseDocumentReader):
    """Reads the PDF text layer with PyMuPDF."""

    def extract(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
