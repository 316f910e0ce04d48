import pytest

from intelliforms.extraction.exceptions import PdfExtractionError
from intelliforms.extraction.pdfplumber_adapter import PdfPlumberAdapter
from intelliforms.extraction.pymupdf_adapter import PyMuPdfAdapter

ADAPTERS = [PdfPlumberAdapter, PyMuPdfAdapter]


@pytest.mark.parametrize("adapter_cls", ADAPTERS)
class TestPdfAdapters:
    def test_extract_returns_text(self, adapter_cls, sample_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = adapter_cls().extract(sample_pdf_bytes)
        assert isinstance(result, str)
        assert "Hello PDF World" in result

    def test_extract_multi_page(self, adapter_cls, multi_page_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = adapter_cls().extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result
        assert result.index("Page one content") < result.index("Page two content")

    def test_extract_empty_pdf_returns_empty_string(self, adapter_cls, empty_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        assert adapter_cls().extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self, adapter_cls) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(PdfExtractionError):
            adapter_cls().extract(b"not a pdf")

    def test_extract_result_is_stripped(self, adapter_cls, sample_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = adapter_cls().extract(sample_pdf_bytes)
        assert result == result.strip()
