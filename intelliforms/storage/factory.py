from intelliforms.config.settings import Settings
from intelliforms.storage.base import BaseBlobStore
from intelliforms.storage.gcs_adapter import GcsBlobStore
from intelliforms.storage.local_adapter import LocalBlobStore


class BlobStoreFactory:
    """Creates the blob store adapter selected by settings."""

    BACKENDS = ("gcs", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore:
        backend = settings.storage_backend.lower()
        if backend == "gcs":
            return GcsBlobStore(project=settings.gcp_project_id)
        if backend == "local":
            return LocalBlobStore(settings.local_storage_root)
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
