from unittest.mock import patch

import pytest

from intelliforms.config.settings import Settings
from intelliforms.extraction.docx_adapter import DocxAdapter
from intelliforms.extraction.factory import ReaderFactory
from intelliforms.extraction.pdfplumber_adapter import PdfPlumberAdapter
from intelliforms.extraction.pymupdf_adapter import PyMuPdfAdapter
from intelliforms.extraction.tesseract_ocr_adapter import TesseractOcrAdapter
from intelliforms.extraction.text_reader import PlainTextReader
from intelliforms.extraction.vision_ocr_adapter import VisionOcrAdapter


class TestCreatePdfReader:
    def test_creates_pdfplumber_adapter(self, settings: Settings) -> None:
        settings.pdf_engine = "pdfplumber"
        assert isinstance(ReaderFactory.create_pdf_reader(settings), PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self, settings: Settings) -> None:
        settings.pdf_engine = "pymupdf"
        assert isinstance(ReaderFactory.create_pdf_reader(settings), PyMuPdfAdapter)

    def test_is_case_insensitive(self, settings: Settings) -> None:
        settings.pdf_engine = "PdfPlumber"
        assert isinstance(ReaderFactory.create_pdf_reader(settings), PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self, settings: Settings) -> None:
        settings.pdf_engine = "unknown"
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            ReaderFactory.create_pdf_reader(settings)


class TestCreateOcrReader:
    def test_creates_vision_adapter(self, settings: Settings) -> None:
        settings.ocr_engine = "vision"
        with patch("intelliforms.extraction.vision_ocr_adapter.vision.ImageAnnotatorClient"):
            assert isinstance(ReaderFactory.create_ocr_reader(settings), VisionOcrAdapter)

    def test_creates_tesseract_adapter(self, settings: Settings) -> None:
        settings.ocr_engine = "tesseract"
        assert isinstance(ReaderFactory.create_ocr_reader(settings), TesseractOcrAdapter)

    def test_raises_for_unknown_engine(self, settings: Settings) -> None:
        settings.ocr_engine = "abbyy"
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            ReaderFactory.create_ocr_reader(settings)


class TestCreate:
    def test_maps_every_supported_extension(self, settings: Settings) -> None:
        settings.ocr_engine = "tesseract"
        readers = ReaderFactory.create(settings)

        assert sorted(readers) == ["doc", "docx", "jpeg", "jpg", "pdf", "png", "txt"]
        assert isinstance(readers["txt"], PlainTextReader)
        assert isinstance(readers["pdf"], PdfPlumberAdapter)
        assert isinstance(readers["docx"], DocxAdapter)
        assert readers["png"] is readers["jpg"] is readers["jpeg"]
