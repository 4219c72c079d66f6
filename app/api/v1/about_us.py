"""About-us section API endpoints."""

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse

from app.api.v1.forms import result_response, to_media_file
from app.core.deps import DBSession, Media
from app.schemas.about_us import AboutUsDTO
from app.services.about_us_service import AboutUsService

router = APIRouter()


@router.get("", response_model=list[AboutUsDTO])
async def list_sections(db: DBSession, media: Media) -> list[AboutUsDTO]:
    """List about-us sections."""
    return await AboutUsService(db, media).list_sections()


@router.get("/{section_id}", response_model=AboutUsDTO)
async def get_section(section_id: str, db: DBSession, media: Media) -> AboutUsDTO:
    """Get a single about-us section."""
    section = await AboutUsService(db, media).get_by_id(section_id)
    if not section:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="About us section not found",
        )
    return AboutUsDTO.model_validate(section)


@router.post("")
async def create_section(
    db: DBSession,
    media: Media,
    title: str | None = Form(None),
    description: str | None = Form(None),
    reverse: bool = Form(False),
    image: UploadFile | None = File(None),
) -> JSONResponse:
    """
    Create an about-us section.

    - **image**: optional image, max 1MB
    - **reverse**: show the image on the other side of the text
    """
    result = await AboutUsService(db, media).create_item(
        {"title": title, "description": description, "reverse": reverse},
        image=await to_media_file(image),
    )
    return result_response(result, status.HTTP_201_CREATED)


@router.put("/{section_id}")
async def update_section(
    section_id: str,
    db: DBSession,
    media: Media,
    title: str | None = Form(None),
    description: str | None = Form(None),
    reverse: bool | None = Form(None),
    remove_image: bool = Form(False, alias="removeImage"),
    image: UploadFile | None = File(None),
) -> JSONResponse:
    """Update an about-us section. Omitted fields keep their value."""
    result = await AboutUsService(db, media).update_item(
        section_id,
        {"title": title, "description": description, "reverse": reverse},
        image=await to_media_file(image),
        remove_image=remove_image,
    )
    return result_response(result)


@router.delete("/{section_id}")
async def delete_section(section_id: str, db: DBSession, media: Media) -> JSONResponse:
    """Delete an about-us section and its image."""
    result = await AboutUsService(db, media).delete_item(section_id)
    return result_response(result)
