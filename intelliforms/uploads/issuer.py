from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from intelliforms.exceptions import ConfigurationError, FileTooLarge, MissingParameter
from intelliforms.logging.logger import Log
from intelliforms.storage.base import BaseBlobStore
from intelliforms.uploads.mime_types import (
    MAX_FILE_SIZE_BYTES,
    mime_type_for,
    normalize_extension,
)
from intelliforms.uploads.models import SignedUploadGrant, UploadRequest


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SignedUrlIssuer:
    """Issues time-limited, content-type-bound upload URLs."""

    def __init__(
        self,
        blob_store: BaseBlobStore,
        *,
        bucket_name: str,
        expiration_minutes: int = 15,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._blob_store = blob_store
        self._bucket_name = bucket_name
        self._expires_in = timedelta(minutes=expiration_minutes)
        self._clock = clock

    def issue(
        self,
        file_base_name: str,
        file_extension: str,
        file_size_bytes: int | float | None = None,
    ) -> SignedUploadGrant:
        """Validate the request and ask the blob store for a write URL.

        Raises:
            MissingParameter: if the base name or extension is blank.
            FileTooLarge: if the size is not positive or above 10 MiB.
            InvalidExtension: if the extension is not allowed.
            ConfigurationError: if no bucket is configured.
            StoreError: if the store cannot issue the URL.
        """
        request = UploadRequest(
            file_base_name=(file_base_name or "").strip(),
            file_extension=(file_extension or "").strip(),
            file_size_bytes=file_size_bytes,
        )
        self._validate(request)
        mime_type = mime_type_for(request.file_extension)
        if not self._bucket_name:
            raise ConfigurationError("BUCKET_NAME is not configured")

        full_file_name = (
            f"{request.file_base_name}{normalize_extension(request.file_extension)}"
        )
        issued_at = self._clock()
        url = self._blob_store.generate_upload_url(
            self._bucket_name,
            full_file_name,
            content_type=mime_type,
            expires_in=self._expires_in,
        )
        Log.info(
            "Signed upload URL issued",
            file_name=full_file_name,
            mime_type=mime_type,
        )
        return SignedUploadGrant(
            url=url,
            full_file_name=full_file_name,
            mime_type=mime_type,
            expires_at=issued_at + self._expires_in,
        )

    @staticmethod
    def _validate(request: UploadRequest) -> None:
        if not request.file_base_name:
            raise MissingParameter("File name must not be empty")
        if not request.file_extension:
            raise MissingParameter("File extension is required")
        size = request.file_size_bytes
        if size is None:
            return
        if isinstance(size, bool) or not isinstance(size, (int, float)) or not size > 0:
            raise FileTooLarge("File size must be a positive number")
        if size > MAX_FILE_SIZE_BYTES:
            raise FileTooLarge(
                f"File exceeds the maximum allowed size "
                f"({MAX_FILE_SIZE_BYTES // (1024 * 1024)} MB)"
            )
