from pathlib import Path

from handnotes.config.settings import Settings
from handnotes.storage.base import BaseObjectStore
from handnotes.storage.local_adapter import LocalObjectStore
from handnotes.storage.s3_adapter import S3ObjectStore


class ObjectStoreFactory:
    """Creates the configured object store adapter."""

    BACKENDS = ("s3", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseObjectStore:
        backend = settings.storage_backend.lower()
        if backend == "s3":
            return S3ObjectStore(
                bucket=settings.storage_bucket,
                endpoint_url=settings.storage_endpoint_url or None,
                region=settings.storage_region or None,
                access_key_id=settings.storage_access_key_id or None,
                secret_access_key=settings.storage_secret_access_key or None,
                public_base_url=settings.storage_public_base_url or None,
            )
        if backend == "local":
            return LocalObjectStore(
                root=Path(settings.storage_local_root),
                public_base_url=settings.storage_public_base_url or None,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
