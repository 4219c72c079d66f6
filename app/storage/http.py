"""HTTP media store for a remote file-upload service.

The service accepts ``POST {base}/files`` (multipart field ``file`` plus a
``kind`` form field) answering ``{"url": ..., "key": ...}``, and
``DELETE {base}/files/{key}``. The key is the last path segment of the
public URL.
"""

from urllib.parse import urlparse

import httpx
from loguru import logger

from app.core.errors import MediaDeleteError, MediaUploadError
from app.storage.base import MediaAsset, MediaFile, MediaKind


class HttpMediaStore:
    """Media store backed by a remote upload service."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {}
        if self._api_key:
            headers["X-Api-Key"] = self._api_key
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )

    @staticmethod
    def key_from_url(url: str) -> str:
        """Extract the file key from a public URL."""
        return urlparse(url).path.rstrip("/").rsplit("/", 1)[-1]

    async def upload(self, kind: MediaKind, file: MediaFile) -> MediaAsset:
        """Upload a file to the remote service."""
        async with self._client() as client:
            try:
                response = await client.post(
                    "/files",
                    data={"kind": kind.value},
                    files={"file": (file.filename, file.data, file.content_type)},
                )
            except httpx.RequestError as e:
                logger.error(f"Media service connection error uploading {file.filename}: {e}")
                raise MediaUploadError(file.filename, str(e)) from e

        if response.status_code not in (200, 201):
            logger.error(
                f"Media service rejected {file.filename}: "
                f"{response.status_code} - {response.text}"
            )
            raise MediaUploadError(file.filename, f"HTTP {response.status_code}")

        try:
            payload = response.json()
            url = payload["url"]
        except (ValueError, KeyError, TypeError) as e:
            raise MediaUploadError(file.filename, "Malformed upload response") from e

        return MediaAsset(url=url, key=payload.get("key") or self.key_from_url(url))

    async def delete(self, url: str) -> None:
        """Delete a file from the remote service by its public URL."""
        key = self.key_from_url(url)
        if not key:
            raise MediaDeleteError(url, "Cannot derive file key from URL")

        async with self._client() as client:
            try:
                response = await client.delete(f"/files/{key}")
            except httpx.RequestError as e:
                logger.warning(f"Media service connection error deleting {key}: {e}")
                raise MediaDeleteError(url, str(e)) from e

        # 404 is acceptable - the file is already gone
        if response.status_code == 404:
            logger.warning(f"Media {key} not found in media service")
            return

        if response.status_code not in (200, 202, 204):
            logger.warning(
                f"Failed to delete media {key}: {response.status_code} - {response.text}"
            )
            raise MediaDeleteError(url, f"HTTP {response.status_code}")
