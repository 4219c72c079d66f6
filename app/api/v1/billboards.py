"""Billboard promo API endpoints."""

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse

from app.api.v1.forms import result_response, to_media_file
from app.core.deps import DBSession, Media
from app.schemas.billboard import BillboardDTO
from app.services.billboard_service import BillboardService

router = APIRouter()


@router.get("", response_model=list[BillboardDTO])
async def list_billboards(db: DBSession, media: Media) -> list[BillboardDTO]:
    """List billboard promos."""
    return await BillboardService(db, media).list_billboards()


@router.get("/{billboard_id}", response_model=BillboardDTO)
async def get_billboard(billboard_id: str, db: DBSession, media: Media) -> BillboardDTO:
    """Get a single billboard promo."""
    billboard = await BillboardService(db, media).get_by_id(billboard_id)
    if not billboard:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Billboard not found",
        )
    return BillboardDTO.model_validate(billboard)


@router.post("")
async def create_billboard(
    db: DBSession,
    media: Media,
    title: str | None = Form(None),
    description: str | None = Form(None),
    button_label: str | None = Form(None, alias="buttonLabel"),
    href: str | None = Form(None),
    image: UploadFile | None = File(None),
) -> JSONResponse:
    """
    Create a billboard promo.

    - **buttonLabel**: call-to-action text
    - **href**: call-to-action link (http/https)
    - **image**: optional image, max 4MB
    """
    result = await BillboardService(db, media).create_item(
        {
            "title": title,
            "description": description,
            "button_label": button_label,
            "href": href,
        },
        image=await to_media_file(image),
    )
    return result_response(result, status.HTTP_201_CREATED)


@router.put("/{billboard_id}")
async def update_billboard(
    billboard_id: str,
    db: DBSession,
    media: Media,
    title: str | None = Form(None),
    description: str | None = Form(None),
    button_label: str | None = Form(None, alias="buttonLabel"),
    href: str | None = Form(None),
    remove_image: bool = Form(False, alias="removeImage"),
    image: UploadFile | None = File(None),
) -> JSONResponse:
    """Update a billboard promo. Omitted fields keep their value."""
    result = await BillboardService(db, media).update_item(
        billboard_id,
        {
            "title": title,
            "description": description,
            "button_label": button_label,
            "href": href,
        },
        image=await to_media_file(image),
        remove_image=remove_image,
    )
    return result_response(result)


@router.delete("/{billboard_id}")
async def delete_billboard(billboard_id: str, db: DBSession, media: Media) -> JSONResponse:
    """Delete a billboard promo and its image."""
    result = await BillboardService(db, media).delete_item(billboard_id)
    return result_response(result)
