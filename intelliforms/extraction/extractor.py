"""Dispatches a stored or uploaded file to the reader for its extension."""

from intelliforms.extraction.base import BaseDocumentReader
from intelliforms.extraction.exceptions import (
    ExtractionError,
    MissingExtension,
    UnsupportedFileType,
)
from intelliforms.logging.logger import Log
from intelliforms.storage.base import BaseBlobStore


def file_extension(file_name: str) -> str:
    """Return the lowercase text after the last dot.

    Raises:
        MissingExtension: if the name contains no dot.
    """
    _, dot, ext = file_name.rpartition(".")
    if not dot:
        raise MissingExtension(f"File has no extension: {file_name}")
    return ext.lower()


class TextExtractor:
    """Extracts plain text from documents by file extension."""

    def __init__(
        self,
        blob_store: BaseBlobStore,
        readers: dict[str, BaseDocumentReader],
    ) -> None:
        self._blob_store = blob_store
        self._readers = readers

    @property
    def supported_extensions(self) -> list[str]:
        return sorted(self._readers)

    def extract(self, bucket_name: str, file_name: str) -> str:
        """Download ``file_name`` from ``bucket_name`` and extract its text.

        Raises:
            MissingExtension: if the file name has no extension.
            UnsupportedFileType: if no reader handles the extension.
            ExtractionError: on any download or parse failure.
        """
        reader = self._reader_for(file_name)
        Log.info(f"Extracting text from {bucket_name}/{file_name}")
        try:
            data = self._blob_store.download(bucket_name, file_name)
        except Exception as exc:
            raise ExtractionError(f"Failed to download {file_name}: {exc}") from exc
        return self._run(reader, data, file_name)

    def extract_bytes(self, data: bytes, file_name: str) -> str:
        """Extract text from in-memory bytes, dispatching on ``file_name``."""
        reader = self._reader_for(file_name)
        return self._run(reader, data, file_name)

    def _reader_for(self, file_name: str) -> BaseDocumentReader:
        ext = file_extension(file_name)
        reader = self._readers.get(ext)
        if reader is None:
            raise UnsupportedFileType(f"Unsupported file type: .{ext}")
        return reader

    @staticmethod
    def _run(reader: BaseDocumentReader, data: bytes, file_name: str) -> str:
        try:
            text = reader.extract(data)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Failed to process {file_name}: {exc}") from exc
        Log.info(f"Extracted {len(text)} chars from {file_name}")
        return text
