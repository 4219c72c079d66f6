"""Local disk media store.

Files are written under ``<root>/<kind>s/`` and served by the application
as static files under the configured public base URL.
"""

import asyncio
import uuid
from pathlib import Path, PurePosixPath

from loguru import logger

from app.core.errors import MediaDeleteError, MediaUploadError
from app.storage.base import MediaAsset, MediaFile, MediaKind


class LocalMediaStore:
    """Media store backed by a directory on the local filesystem."""

    def __init__(self, root: str | Path, base_url: str):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def _key_for(self, kind: MediaKind, filename: str) -> str:
        suffix = PurePosixPath(filename).suffix.lower()
        return f"{kind.value}s/{uuid.uuid4().hex}{suffix}"

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def _path_from_url(self, url: str) -> Path | None:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            return None
        key = url[len(prefix):]
        if not key or PurePosixPath(key).is_absolute():
            return None
        # The resolved file must stay inside the media root
        root = self.root.resolve()
        path = (root / key).resolve()
        if path == root or not path.is_relative_to(root):
            return None
        return path

    async def upload(self, kind: MediaKind, file: MediaFile) -> MediaAsset:
        """Write the file to disk and return its public URL."""
        key = self._key_for(kind, file.filename)
        path = self.root / key
        try:
            await asyncio.to_thread(self._write, path, file.data)
        except OSError as e:
            logger.error(f"Failed to store {file.filename}: {e}")
            raise MediaUploadError(file.filename, str(e)) from e

        logger.debug(f"Stored {file.filename} as {key} ({file.size} bytes)")
        return MediaAsset(url=f"{self.base_url}/{key}", key=key)

    async def delete(self, url: str) -> None:
        """Remove the file behind a public URL."""
        path = self._path_from_url(url)
        if path is None:
            raise MediaDeleteError(url, "URL does not belong to this media store")

        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to delete media file {path}: {e}")
            raise MediaDeleteError(url, str(e)) from e
