import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.exceptions import OcrError


class TesseractOcrAdapter(BaseDocumentReader):
    """Detects text in images with a local Tesseract install."""

    def __init__(self, lang: str | None = None) -> None:
        self._lang = lang

    def extract(self, data: bytes) -> str:
        try:
            with Image.open(io.BytesIO(data)) as image:
                text = pytesseract.image_to_string(image, lang=self._lang)
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrError(f"Tesseract is not installed: {exc}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise OcrError(f"Cannot open image: {exc}") from exc
        except pytesseract.TesseractError as exc:
            raise OcrError(f"Tesseract OCR failed: {exc}") from exc
        return text.strip()
