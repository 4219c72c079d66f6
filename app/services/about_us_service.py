"""About-us section service."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.models.about_us import AboutUs
from app.schemas.about_us import AboutUsDTO, AboutUsFields
from app.services.content_service import ImageContentService
from app.storage.base import MediaStore

settings = get_settings()


class AboutUsService(ImageContentService[AboutUs]):
    """About-us sections with an optional image of at most 1MB."""

    entity_name = "About us section"
    fields_schema = AboutUsFields
    max_image_size = settings.max_about_us_image_size

    def __init__(self, db: AsyncSession, media_store: MediaStore):
        super().__init__(db, AboutUs, media_store)

    def apply_fields(self, obj: AboutUs, fields: AboutUsFields) -> None:
        obj.title = fields.title
        obj.description = fields.description
        obj.reverse = fields.reverse

    async def list_sections(self) -> list[AboutUsDTO]:
        """Get all sections in creation order."""
        items = await self.get_all(AboutUs.created_at)
        return [AboutUsDTO.model_validate(item) for item in items]
