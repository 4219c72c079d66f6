"""Media storage backends.

Supported backends:
    - local: files on disk, served by the app under /media
    - http: remote file-upload service
"""

from app.core.config import Settings
from app.storage.base import MediaAsset, MediaFile, MediaKind, MediaStore
from app.storage.http import HttpMediaStore
from app.storage.local import LocalMediaStore


def create_media_store(settings: Settings) -> MediaStore:
    """Build the media store selected by ``settings.media_backend``."""
    if settings.media_backend == "http":
        return HttpMediaStore(
            base_url=settings.media_service_url,
            api_key=settings.media_service_api_key,
            timeout=settings.media_service_timeout,
        )
    return LocalMediaStore(
        root=settings.media_root,
        base_url=settings.media_base_url,
    )


__all__ = [
    "HttpMediaStore",
    "LocalMediaStore",
    "MediaAsset",
    "MediaFile",
    "MediaKind",
    "MediaStore",
    "create_media_store",
]
