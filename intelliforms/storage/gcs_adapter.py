from datetime import timedelta

from google.api_core import exceptions as gcloud_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import storage

from intelliforms.exceptions import StoreError
from intelliforms.storage.base import BaseBlobStore


class GcsBlobStore(BaseBlobStore):
    """Blob store backed by Google Cloud Storage."""

    def __init__(self, project: str | None = None) -> None:
        self._client = storage.Client(project=project or None)

    def download(self, bucket_name: str, object_name: str) -> bytes:
        blob = self._client.bucket(bucket_name).blob(object_name)
        try:
            return blob.download_as_bytes()
        except (gcloud_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as exc:
            raise StoreError(
                f"Failed to download gs://{bucket_name}/{object_name}: {exc}"
            ) from exc

    def generate_upload_url(
        self,
        bucket_name: str,
        object_name: str,
        *,
        content_type: str,
        expires_in: timedelta,
    ) -> str:
        blob = self._client.bucket(bucket_name).blob(object_name)
        try:
            return blob.generate_signed_url(
                version="v4",
                expiration=expires_in,
                method="PUT",
                content_type=content_type,
            )
        except (
            gcloud_exceptions.GoogleAPIError,
            auth_exceptions.GoogleAuthError,
            AttributeError,
            ValueError,
        ) as exc:
            # AttributeError/ValueError: credentials without a private key cannot sign.
            raise StoreError(f"Failed to sign upload URL for {object_name}: {exc}") from exc
