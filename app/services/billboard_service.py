"""Billboard promo service."""

from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.models.billboard import Billboard
from app.schemas.billboard import BillboardDTO, BillboardFields
from app.services.content_service import ImageContentService
from app.storage.base import MediaStore

settings = get_settings()


class BillboardService(ImageContentService[Billboard]):
    """Billboard promos: a call-to-action link with an optional image."""

    entity_name = "Billboard"
    fields_schema = BillboardFields
    max_image_size = settings.max_image_size

    def __init__(self, db: AsyncSession, media_store: MediaStore):
        super().__init__(db, Billboard, media_store)

    def apply_fields(self, obj: Billboard, fields: BillboardFields) -> None:
        obj.title = fields.title
        obj.description = fields.description
        obj.button_label = fields.button_label
        obj.href = str(fields.href)

    async def list_billboards(self) -> list[BillboardDTO]:
        """Get all billboards, newest first."""
        items = await self.get_all(desc(Billboard.created_at))
        return [BillboardDTO.model_validate(item) for item in items]
