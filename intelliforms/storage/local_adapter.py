from datetime import datetime, timedelta, timezone
from pathlib import Path
from urllib.parse import urlencode

from intelliforms.exceptions import StoreError
from intelliforms.storage.base import BaseBlobStore


def object_path(root: Path, bucket_name: str, object_name: str) -> Path:
    """Build path to an object: {root}/{bucket_name}/{object_name}"""
    return root / bucket_name / object_name


class LocalBlobStore(BaseBlobStore):
    """Filesystem-backed blob store for local development.

    Upload URLs are ``file://`` URIs; nothing enforces their expiry.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    def download(self, bucket_name: str, object_name: str) -> bytes:
        path = self._resolve_path(bucket_name, object_name)
        if not path.is_file():
            raise StoreError(f"Object not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StoreError(f"Failed to read {path}: {exc}") from exc

    def generate_upload_url(
        self,
        bucket_name: str,
        object_name: str,
        *,
        content_type: str,
        expires_in: timedelta,
    ) -> str:
        path = self._resolve_path(bucket_name, object_name)
        expires_at = datetime.now(timezone.utc) + expires_in
        query = urlencode(
            {"content_type": content_type, "expires": expires_at.isoformat()}
        )
        return f"{path.resolve().as_uri()}?{query}"

    def _resolve_path(self, bucket_name: str, object_name: str) -> Path:
        path = object_path(self._root, bucket_name, object_name)
        if not path.resolve().is_relative_to(self._root.resolve()):
            raise StoreError(f"Object name escapes storage root: {object_name}")
        return path
