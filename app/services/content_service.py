"""Shared workflow for single-image content records (about-us, billboards)."""

from typing import Any, Mapping, TypeVar

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DomainError, MediaDeleteError
from app.core.validation import check_media_files, keyed_by_alias, validate_fields
from app.db.base import Base
from app.schemas.result import OperationResult
from app.services.base_service import BaseService
from app.services.media_service import MediaSteps
from app.storage.base import MediaFile, MediaKind, MediaStore

ContentModel = TypeVar("ContentModel", bound=Base)


class ImageContentService(BaseService[ContentModel]):
    """CRUD for records made of validated fields plus an optional image.

    Subclasses set ``fields_schema`` and ``max_image_size`` and implement
    ``apply_fields``.
    """

    fields_schema: type[BaseModel]
    max_image_size: int

    def __init__(self, db: AsyncSession, model: type[ContentModel], media_store: MediaStore):
        super().__init__(db, model)
        self.media_store = media_store

    def apply_fields(self, obj: ContentModel, fields: Any) -> None:
        raise NotImplementedError

    def current_fields(self, obj: ContentModel) -> dict[str, Any]:
        """Stored field values, used as the base for partial updates."""
        return {
            field.alias or name: getattr(obj, name)
            for name, field in self.fields_schema.model_fields.items()
        }

    async def _run(self, action: str, operation) -> OperationResult:
        name = self.entity_name
        try:
            record_id, delete_errors = await operation
        except DomainError as e:
            logger.warning(f"{name} {action} failed: {e}")
            return OperationResult.failed(e)
        except Exception as e:
            logger.exception(f"Unexpected error during {name} {action}: {e}")
            await self.db.rollback()
            return OperationResult.failed(e)

        logger.info(f"{name} {action} succeeded: {record_id}")
        return OperationResult.ok(record_id, delete_errors)

    def _check_image(self, image: MediaFile | None) -> None:
        check_media_files([(image, "image", MediaKind.IMAGE, self.max_image_size)])

    async def create_item(
        self,
        data: Mapping[str, Any],
        image: MediaFile | None = None,
    ) -> OperationResult:
        """Create a record, uploading its image first when given."""
        return await self._run("create", self._create(data, image))

    async def _create(
        self,
        data: Mapping[str, Any],
        image: MediaFile | None,
    ) -> tuple[str, list[MediaDeleteError]]:
        fields = validate_fields(self.fields_schema, keyed_by_alias(self.fields_schema, data))
        self._check_image(image)

        media = MediaSteps(self.media_store)
        try:
            obj = self.model()
            self.apply_fields(obj, fields)
            obj.image = await media.upload(MediaKind.IMAGE, image) if image else None
            obj = await self.create(obj)
        except Exception:
            await media.compensate()
            raise
        return obj.id, []

    async def update_item(
        self,
        item_id: str,
        data: Mapping[str, Any],
        image: MediaFile | None = None,
        remove_image: bool = False,
    ) -> OperationResult:
        """Update a record; a new image replaces and deletes the previous one."""
        return await self._run("update", self._update(item_id, data, image, remove_image))

    async def _update(
        self,
        item_id: str,
        data: Mapping[str, Any],
        image: MediaFile | None,
        remove_image: bool,
    ) -> tuple[str, list[MediaDeleteError]]:
        obj = await self.get_or_raise(item_id)
        submitted = keyed_by_alias(self.fields_schema, data)
        fields = validate_fields(self.fields_schema, {**self.current_fields(obj), **submitted})
        self._check_image(image)

        superseded: list[str | None] = []
        media = MediaSteps(self.media_store)
        try:
            if image:
                new_url = await media.upload(MediaKind.IMAGE, image)
                superseded.append(obj.image)
                obj.image = new_url
            elif remove_image:
                superseded.append(obj.image)
                obj.image = None
            self.apply_fields(obj, fields)
            await self.update(obj)
        except Exception:
            await media.compensate()
            raise

        return obj.id, await media.delete_best_effort(superseded)

    async def delete_item(self, item_id: str) -> OperationResult:
        """Delete a record and, best-effort, its image."""
        return await self._run("delete", self._delete(item_id))

    async def _delete(self, item_id: str) -> tuple[str, list[MediaDeleteError]]:
        obj = await self.get_or_raise(item_id)
        delete_errors = await MediaSteps(self.media_store).delete_best_effort([obj.image])
        await self.delete(obj)
        return item_id, delete_errors
