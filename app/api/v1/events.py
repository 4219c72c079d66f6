"""Event API endpoints."""

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import JSONResponse

from app.api.v1.forms import result_response, to_media_file, to_media_files
from app.core.deps import DBSession, Media
from app.schemas.event import EventDTO, EventListResponse
from app.services.event_service import EventService

router = APIRouter()


@router.get("", response_model=EventListResponse)
async def list_events(db: DBSession, media: Media) -> EventListResponse:
    """List all events, latest start first."""
    events = await EventService(db, media).list_events()
    return EventListResponse(events=events, total=len(events))


@router.get("/{event_id}", response_model=EventDTO)
async def get_event(event_id: str, db: DBSession, media: Media) -> EventDTO:
    """Get a single event."""
    event = await EventService(db, media).get_event(event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    return event


@router.post("")
async def create_event(
    db: DBSession,
    media: Media,
    title: str | None = Form(None),
    description: str | None = Form(None),
    address: str | None = Form(None),
    start_date: str | None = Form(None, alias="startDate"),
    end_date: str | None = Form(None, alias="endDate"),
    video_url: str | None = Form(None, alias="videoUrl"),
    image: UploadFile | None = File(None),
    images: list[UploadFile] | None = File(None),
    audio: UploadFile | None = File(None),
) -> JSONResponse:
    """
    Create an event (multipart form).

    - **title**, **description**, **address**, **startDate**, **endDate**: event fields
    - **image**: billboard image (required, max 4MB)
    - **images**: additional images (max 4MB each)
    - **audio**: podcast file
    - **videoUrl**: promotional video link
    """
    service = EventService(db, media)
    result = await service.create_event(
        {
            "title": title,
            "description": description,
            "address": address,
            "start_date": start_date,
            "end_date": end_date,
        },
        image=await to_media_file(image),
        images=await to_media_files(images),
        audio=await to_media_file(audio),
        video_url=video_url,
    )
    return result_response(result, status.HTTP_201_CREATED)


@router.put("/{event_id}")
async def update_event(
    event_id: str,
    db: DBSession,
    media: Media,
    title: str | None = Form(None),
    description: str | None = Form(None),
    address: str | None = Form(None),
    start_date: str | None = Form(None, alias="startDate"),
    end_date: str | None = Form(None, alias="endDate"),
    video_url: str | None = Form(None, alias="videoUrl"),
    removed_images: list[str] | None = Form(None, alias="removedImages"),
    remove_audio: bool = Form(False, alias="removeAudio"),
    remove_video: bool = Form(False, alias="removeVideo"),
    image: UploadFile | None = File(None),
    images: list[UploadFile] | None = File(None),
    audio: UploadFile | None = File(None),
) -> JSONResponse:
    """
    Update an event (multipart form). Omitted fields keep their value.

    - **image**: replaces the billboard; the previous one is deleted
    - **images**: appended to the kept images
    - **removedImages**: current image URLs to remove and delete
    - **audio** / **removeAudio**: replace or clear the podcast
    - **videoUrl** / **removeVideo**: replace or clear the video link
    """
    service = EventService(db, media)
    result = await service.update_event(
        event_id,
        {
            "title": title,
            "description": description,
            "address": address,
            "start_date": start_date,
            "end_date": end_date,
        },
        image=await to_media_file(image),
        images=await to_media_files(images),
        removed_image_urls=removed_images,
        audio=await to_media_file(audio),
        remove_audio=remove_audio,
        video_url="" if remove_video and not video_url else video_url,
    )
    return result_response(result)


@router.delete("/{event_id}")
async def delete_event(
    event_id: str,
    db: DBSession,
    media: Media,
    media_urls: list[str] | None = Query(None, alias="mediaUrl"),
) -> JSONResponse:
    """
    Delete an event and its media.

    - **mediaUrl**: media URLs to delete (repeatable); defaults to the event's own media
    """
    service = EventService(db, media)
    result = await service.delete_event(event_id, media_urls)
    return result_response(result)
