from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.extractor import TextExtractor
from intelliforms.extraction.factory import ReaderFactory

__all__ = ["BaseDocumentReader", "ReaderFactory", "TextExtractor"]
