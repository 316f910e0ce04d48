from abc import ABC, abstractmethod
from datetime import timedelta


class BaseBlobStore(ABC):
    """Contract for all blob storage adapters."""

    @abstractmethod
    def download(self, bucket_name: str, object_name: str) -> bytes:
        """Read a whole object into memory.

        Raises:
            StoreError: if the object cannot be read.
        """

    @abstractmethod
    def generate_upload_url(
        self,
        bucket_name: str,
        object_name: str,
        *,
        content_type: str,
        expires_in: timedelta,
    ) -> str:
        """Issue a write-scoped URL bound to ``content_type``.

        No object is created; the URL only authorizes a future upload.

        Raises:
            StoreError: if the credential cannot be issued.
        """
