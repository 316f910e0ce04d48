from google.api_core import exceptions as gcloud_exceptions
from google.cloud import vision

from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.exceptions import OcrError


class VisionOcrAdapter(BaseDocumentReader):
    """Detects text in images with Google Cloud Vision."""

    def __init__(self) -> None:
        self._client = vision.ImageAnnotatorClient()

    def extract(self, data: bytes) -> str:
        try:
            response = self._client.text_detection(image=vision.Image(content=data))
        except gcloud_exceptions.GoogleAPIError as exc:
            raise OcrError(f"Vision text detection failed: {exc}") from exc
        if response.error.message:
            raise OcrError(f"Vision text detection failed: {response.error.message}")
        if not response.text_annotations:
            return ""
        # The first annotation holds the full detected text.
        return response.text_annotations[0].description
