from intelliforms.config.settings import Settings
from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.docx_adapter import DocxAdapter
from intelliforms.extraction.pdfplumber_adapter import PdfPlumberAdapter
from intelliforms.extraction.pymupdf_adapter import PyMuPdfAdapter
from intelliforms.extraction.tesseract_ocr_adapter import TesseractOcrAdapter
from intelliforms.extraction.text_reader import PlainTextReader
from intelliforms.extraction.vision_ocr_adapter import VisionOcrAdapter


class ReaderFactory:
    """Creates the reader for each supported extension based on settings."""

    PDF_ENGINES: dict[str, type[BaseDocumentReader]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    OCR_ENGINES: dict[str, type[BaseDocumentReader]] = {
        "vision": VisionOcrAdapter,
        "tesseract": TesseractOcrAdapter,
    }

    @classmethod
    def create_pdf_reader(cls, settings: Settings) -> BaseDocumentReader:
        return cls._pick(cls.PDF_ENGINES, settings.pdf_engine, "PDF engine")

    @classmethod
    def create_ocr_reader(cls, settings: Settings) -> BaseDocumentReader:
        return cls._pick(cls.OCR_ENGINES, settings.ocr_engine, "OCR engine")

    @classmethod
    def create(cls, settings: Settings) -> dict[str, BaseDocumentReader]:
        """Map every supported extension (no dot, lowercase) to its reader."""
        pdf_reader = cls.create_pdf_reader(settings)
        ocr_reader = cls.create_ocr_reader(settings)
        word_reader = DocxAdapter()
        return {
            "txt": PlainTextReader(),
            "pdf": pdf_reader,
            "doc": word_reader,
            "docx": word_reader,
            "png": ocr_reader,
            "jpg": ocr_reader,
            "jpeg": ocr_reader,
        }

    @staticmethod
    def _pick(
        adapters: dict[str, type[BaseDocumentReader]], name: str, kind: str
    ) -> BaseDocumentReader:
        engine = name.lower()
        adapter_cls = adapters.get(engine)
        if adapter_cls is None:
            raise ValueError(f"Unknown {kind} '{engine}'. Choose from: {list(adapters)}")
        return adapter_cls()
