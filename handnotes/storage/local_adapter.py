from pathlib import Path

from handnotes.storage.base import BaseObjectStore
from handnotes.storage.exceptions import ObjectAlreadyExistsError, StorageError


class LocalObjectStore(BaseObjectStore):
    """Stores objects as files under a root directory: {root}/{key}.

    Public URLs are only available when a base URL serving the root is
    configured.
    """

    DEFAULT_ROOT = Path("/app/files")

    def __init__(self, root: Path | None = None, public_base_url: str | None = None) -> None:
        self._root = root if root is not None else self.DEFAULT_ROOT
        self._public_base_url = public_base_url

    @property
    def root(self) -> Path:
        return self._root

    def upload(self, key: str, data: bytes, content_type: str) -> None:
        _ = content_type
        path = self._resolve_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("xb") as fh:
                fh.write(data)
        except FileExistsError as exc:
            raise ObjectAlreadyExistsError(f"Object '{key}' already exists") from exc
        except OSError as exc:
            raise StorageError(f"Failed to write '{key}': {exc}") from exc

    def public_url(self, key: str) -> str | None:
        if not self._public_base_url:
            return None
        return f"{self._public_base_url.rstrip('/')}/{key}"

    def delete(self, key: str) -> None:
        try:
            self._resolve_path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to delete '{key}': {exc}") from exc

    def _resolve_path(self, key: str) -> Path:
        path = (self._root / key).resolve()
        if not path.is_relative_to(self._root.resolve()):
            raise StorageError(f"Key '{key}' escapes the storage root")
        return path
