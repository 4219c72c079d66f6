"""Media steps shared by the content workflows.

A ``MediaSteps`` instance lives for one workflow call. It remembers what it
uploaded so a failed call can remove its own uploads, and runs best-effort
deletions that report failures instead of raising them.
"""

from loguru import logger

from app.core.errors import MediaDeleteError, MediaUploadError
from app.storage.base import MediaAsset, MediaFile, MediaKind, MediaStore


class MediaSteps:
    """Upload/delete steps against a media store for a single operation."""

    def __init__(self, store: MediaStore):
        self.store = store
        self.uploaded: list[MediaAsset] = []

    async def upload(self, kind: MediaKind, file: MediaFile) -> str:
        """Upload a file and return its public URL.

        Raises:
            MediaUploadError: If the store fails for any reason.
        """
        try:
            asset = await self.store.upload(kind, file)
        except MediaUploadError:
            raise
        except Exception as e:
            logger.error(f"Unexpected media store error uploading {file.filename}: {e}")
            raise MediaUploadError(file.filename, str(e)) from e

        self.uploaded.append(asset)
        return asset.url

    async def upload_all(self, kind: MediaKind, files: list[MediaFile]) -> list[str]:
        """Upload files one after another, stopping at the first failure."""
        return [await self.upload(kind, file) for file in files]

    async def delete_best_effort(self, urls: list[str | None]) -> list[MediaDeleteError]:
        """Delete each URL once, collecting failures instead of raising."""
        failures: list[MediaDeleteError] = []
        for url in dict.fromkeys(u for u in urls if u):
            try:
                await self.store.delete(url)
            except MediaDeleteError as e:
                logger.warning(f"Media cleanup failed for {url}: {e.reason or e.message}")
                failures.append(e)
            except Exception as e:
                logger.warning(f"Media cleanup failed for {url}: {e}")
                failures.append(MediaDeleteError(url, str(e)))
        return failures

    async def compensate(self) -> None:
        """Remove the assets uploaded by this operation after it failed."""
        if not self.uploaded:
            return
        urls = [asset.url for asset in self.uploaded]
        self.uploaded = []
        failures = await self.delete_best_effort(urls)
        logger.info(
            f"Removed {len(urls) - len(failures)} of {len(urls)} media files "
            f"uploaded by a failed operation"
        )
