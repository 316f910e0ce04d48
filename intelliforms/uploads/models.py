from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UploadRequest:
    """Client request for a signed upload URL."""

    file_base_name: str
    file_extension: str
    file_size_bytes: int | float | None = None


@dataclass(frozen=True)
class SignedUploadGrant:
    """Time-limited write credential for a single object."""

    url: str
    full_file_name: str
    mime_type: str
    expires_at: datetime


@dataclass(frozen=True)
class UploadNotification:
    """Client signal that a direct upload has finished."""

    file_name: str
    template_id: str
