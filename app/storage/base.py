"""Base types and interface for media storage backends."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class MediaKind(str, Enum):
    """Kind of binary asset accepted by the Media Store."""

    IMAGE = "image"
    AUDIO = "audio"


@dataclass(frozen=True)
class MediaFile:
    """An uploaded file read into memory at the request boundary."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class MediaAsset:
    """A stored asset: its public URL and the backend key used to delete it."""

    url: str
    key: str


class MediaStore(Protocol):
    """Protocol interface for media storage backends.

    Implementations raise ``MediaUploadError`` / ``MediaDeleteError`` from
    app.core.errors; callers decide whether a failure is fatal.
    """

    async def upload(self, kind: MediaKind, file: MediaFile) -> MediaAsset:
        """Store a file and return its public URL.

        Args:
            kind: Image or audio
            file: File contents and metadata
        """
        ...

    async def delete(self, url: str) -> None:
        """Delete a previously stored asset by its public URL.

        Deleting an asset that no longer exists succeeds.
        """
        ...
