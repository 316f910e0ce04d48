import io

import docx

from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.exceptions import DocumentReadError
from intelliforms.logging.logger import Log


class DocxAdapter(BaseDocumentReader):
    """Reads paragraph and table text from Word documents with python-docx.

    Embedded images are skipped; skipping them is reported as a warning.
    Legacy binary ``.doc`` files are not OOXML and fail with DocumentReadError.
    """

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as exc:
            raise DocumentReadError(f"Word extraction failed: {exc}") from exc

        parts = [p.text for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    parts.append("\t".join(cells))

        image_count = len(document.inline_shapes)
        if image_count:
            Log.warning(f"Skipped {image_count} embedded images during Word extraction")
        return "\n".join(parts)
