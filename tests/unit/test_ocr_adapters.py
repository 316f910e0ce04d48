from unittest.mock import MagicMock, patch

import pytesseract
import pytest
from google.api_core import exceptions as gcloud_exceptions

from intelliforms.extraction.exceptions import OcrError
from intelliforms.extraction.tesseract_ocr_adapter import TesseractOcrAdapter
from intelliforms.extraction.vision_ocr_adapter import VisionOcrAdapter


def _make_vision_adapter() -> tuple[VisionOcrAdapter, MagicMock]:
    client = MagicMock()
    with patch(
        "intelliforms.extraction.vision_ocr_adapter.vision.ImageAnnotatorClient",
        return_value=client,
    ):
        adapter = VisionOcrAdapter()
    return adapter, client


def _vision_response(texts: list[str], error: str = "") -> MagicMock:
    response = MagicMock()
    response.error.message = error
    response.text_annotations = [MagicMock(description=t) for t in texts]
    return response


class TestVisionOcrAdapter:
    def test_returns_full_text_annotation(self) -> None:
        adapter, client = _make_vision_adapter()
        client.text_detection.return_value = _vision_response(
            ["Name\nEmail", "Name", "Email"]
        )
        assert adapter.extract(b"png-bytes") == "Name\nEmail"

    def test_returns_empty_string_without_annotations(self) -> None:
        adapter, client = _make_vision_adapter()
        client.text_detection.return_value = _vision_response([])
        assert adapter.extract(b"png-bytes") == ""

    def test_raises_on_response_error(self) -> None:
        adapter, client = _make_vision_adapter()
        client.text_detection.return_value = _vision_response([], error="Bad image data")
        with pytest.raises(OcrError, match="Bad image data"):
            adapter.extract(b"png-bytes")

    def test_wraps_api_errors(self) -> None:
        adapter, client = _make_vision_adapter()
        client.text_detection.side_effect = gcloud_exceptions.PermissionDenied("denied")
        with pytest.raises(OcrError, match="Vision text detection failed"):
            adapter.extract(b"png-bytes")


class TestTesseractOcrAdapter:
    def test_returns_stripped_text(self, sample_png_bytes: bytes) -> None:
        with patch(
            "intelliforms.extraction.tesseract_ocr_adapter.pytesseract.image_to_string",
            return_value="  Invoice number\n\n",
        ):
            assert TesseractOcrAdapter().extract(sample_png_bytes) == "Invoice number"

    def test_passes_language(self, sample_png_bytes: bytes) -> None:
        with patch(
            "intelliforms.extraction.tesseract_ocr_adapter.pytesseract.image_to_string",
            return_value="",
        ) as mock_ocr:
            TesseractOcrAdapter(lang="spa").extract(sample_png_bytes)
        assert mock_ocr.call_args.kwargs["lang"] == "spa"

    def test_raises_on_unreadable_image(self) -> None:
        with pytest.raises(OcrError, match="Cannot open image"):
            TesseractOcrAdapter().extract(b"not an image")

    def test_raises_when_tesseract_missing(self, sample_png_bytes: bytes) -> None:
        with patch(
            "intelliforms.extraction.tesseract_ocr_adapter.pytesseract.image_to_string",
            side_effect=pytesseract.TesseractNotFoundError(),
        ):
            with pytest.raises(OcrError, match="not installed"):
                TesseractOcrAdapter().extract(sample_png_bytes)
