"""Event service - event lifecycle with media attachment management.

Every public workflow method returns an ``OperationResult`` and never raises:
domain errors become failed results with their message, anything else is
logged and reported with a generic message.

Side effects are ordered so the record never references media that does not
exist: uploads run first, the record is written once all of them succeed, and
superseded media is deleted only after the record stops referencing it.
"""

from typing import Any, Mapping

from loguru import logger
from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import DomainError, MediaDeleteError, MissingRequiredMediaError
from app.core.validation import check_media_files, keyed_by_alias, validate_fields
from app.models.event import Event
from app.schemas.event import EventDTO, EventFields
from app.schemas.result import OperationResult
from app.services.base_service import BaseService
from app.services.media_service import MediaSteps
from app.storage.base import MediaFile, MediaKind, MediaStore
from app.utils.video import to_embed_url

settings = get_settings()


class EventService(BaseService[Event]):
    """Event service for event CRUD and its media."""

    entity_name = "Event"

    def __init__(self, db: AsyncSession, media_store: MediaStore):
        super().__init__(db, Event)
        self.media_store = media_store

    async def list_events(self) -> list[EventDTO]:
        """Get all events, latest start first."""
        events = await self.get_all(desc(Event.start_date))
        return [EventDTO.from_model(e) for e in events]

    async def get_event(self, event_id: str) -> EventDTO | None:
        """Get a single event."""
        event = await self.get_by_id(event_id)
        return EventDTO.from_model(event) if event else None

    def _check_files(
        self,
        image: MediaFile | None,
        images: list[MediaFile],
        audio: MediaFile | None,
    ) -> None:
        checks = [(image, "image", MediaKind.IMAGE, settings.max_image_size)]
        checks += [
            (f, f"images.{i}", MediaKind.IMAGE, settings.max_image_size)
            for i, f in enumerate(images)
        ]
        checks.append((audio, "audio", MediaKind.AUDIO, settings.max_audio_size))
        check_media_files(checks)

    async def _run(self, action: str, operation) -> OperationResult:
        """Run a workflow step and map its outcome to a result."""
        try:
            record_id, delete_errors = await operation
        except DomainError as e:
            logger.warning(f"Event {action} failed: {e}")
            return OperationResult.failed(e)
        except Exception as e:
            logger.exception(f"Unexpected error during event {action}: {e}")
            await self.db.rollback()
            return OperationResult.failed(e)

        if delete_errors:
            logger.warning(
                f"Event {action} for {record_id} left {len(delete_errors)} "
                f"media files undeleted"
            )
        logger.info(f"Event {action} succeeded: {record_id}")
        return OperationResult.ok(record_id, delete_errors)

    async def create_event(
        self,
        data: Mapping[str, Any],
        image: MediaFile | None,
        images: list[MediaFile] | None = None,
        audio: MediaFile | None = None,
        video_url: str | None = None,
    ) -> OperationResult:
        """Create an event with its billboard image and optional media.

        - **data**: title, description, address, startDate, endDate
        - **image**: billboard image, required
        - **images**: additional images
        - **audio**: podcast file
        - **video_url**: video link, YouTube links become embed links
        """
        return await self._run(
            "create",
            self._create(data, image, images or [], audio, video_url),
        )

    async def _create(
        self,
        data: Mapping[str, Any],
        image: MediaFile | None,
        images: list[MediaFile],
        audio: MediaFile | None,
        video_url: str | None,
    ) -> tuple[str, list[MediaDeleteError]]:
        fields = validate_fields(EventFields, keyed_by_alias(EventFields, data))
        if image is None:
            raise MissingRequiredMediaError("image")
        self._check_files(image, images, audio)

        media = MediaSteps(self.media_store)
        try:
            billboard = await media.upload(MediaKind.IMAGE, image)
            image_urls = await media.upload_all(MediaKind.IMAGE, images)
            podcast_url = await media.upload(MediaKind.AUDIO, audio) if audio else None

            event = Event(
                title=fields.title,
                description=fields.description,
                address=fields.address,
                start_date=fields.start_date,
                end_date=fields.end_date,
                billboard=billboard,
                podcast_url=podcast_url,
                video_url=to_embed_url(video_url) or None,
            )
            event.set_images(image_urls)
            event = await self.create(event)
        except Exception:
            await media.compensate()
            raise

        return event.id, []

    async def update_event(
        self,
        event_id: str,
        data: Mapping[str, Any],
        image: MediaFile | None = None,
        images: list[MediaFile] | None = None,
        removed_image_urls: list[str] | None = None,
        audio: MediaFile | None = None,
        remove_audio: bool = False,
        video_url: str | None = None,
    ) -> OperationResult:
        """Update an event's fields and media.

        - **data**: any subset of the event fields
        - **image**: replacement billboard image
        - **images**: images appended after the retained ones
        - **removed_image_urls**: current images to drop and delete
        - **audio**: replacement podcast file
        - **remove_audio**: clear the podcast when no new file is given
        - **video_url**: new video link; None keeps the current one, "" clears it
        """
        return await self._run(
            "update",
            self._update(
                event_id,
                data,
                image,
                images or [],
                removed_image_urls or [],
                audio,
                remove_audio,
                video_url,
            ),
        )

    async def _update(
        self,
        event_id: str,
        data: Mapping[str, Any],
        image: MediaFile | None,
        images: list[MediaFile],
        removed_image_urls: list[str],
        audio: MediaFile | None,
        remove_audio: bool,
        video_url: str | None,
    ) -> tuple[str, list[MediaDeleteError]]:
        event = await self.get_or_raise(event_id)

        # Submitted fields overlay the stored ones, then the whole is validated
        current = {
            "title": event.title,
            "description": event.description,
            "address": event.address,
            "startDate": event.start_date,
            "endDate": event.end_date,
        }
        fields = validate_fields(EventFields, {**current, **keyed_by_alias(EventFields, data)})
        self._check_files(image, images, audio)

        current_images = event.get_images()
        removed = [url for url in dict.fromkeys(removed_image_urls) if url in current_images]
        retained = [url for url in current_images if url not in removed]

        superseded: list[str | None] = []
        media = MediaSteps(self.media_store)
        try:
            billboard = event.billboard
            if image:
                billboard = await media.upload(MediaKind.IMAGE, image)
                superseded.append(event.billboard)

            new_image_urls = await media.upload_all(MediaKind.IMAGE, images)
            superseded.extend(removed)

            podcast_url = event.podcast_url
            if audio:
                podcast_url = await media.upload(MediaKind.AUDIO, audio)
                superseded.append(event.podcast_url)
            elif remove_audio:
                podcast_url = None
                superseded.append(event.podcast_url)

            event.title = fields.title
            event.description = fields.description
            event.address = fields.address
            event.start_date = fields.start_date
            event.end_date = fields.end_date
            event.billboard = billboard
            event.set_images(retained + new_image_urls)
            event.podcast_url = podcast_url
            if video_url is not None:
                event.video_url = to_embed_url(video_url) or None
            await self.update(event)
        except Exception:
            await media.compensate()
            raise

        # Media still referenced by the saved record is never deleted
        still_used = set(event.media_urls())
        delete_errors = await media.delete_best_effort(
            [url for url in superseded if url not in still_used]
        )
        return event.id, delete_errors

    async def delete_event(
        self,
        event_id: str,
        known_media_urls: list[str] | None = None,
    ) -> OperationResult:
        """Delete an event and its media.

        Media deletion is best-effort and never blocks removing the record.
        When ``known_media_urls`` is None the record's own media is used;
        otherwise only the given URLs that belong to the record are deleted.
        """
        return await self._run("delete", self._delete(event_id, known_media_urls))

    async def _delete(
        self,
        event_id: str,
        known_media_urls: list[str] | None,
    ) -> tuple[str, list[MediaDeleteError]]:
        event = await self.get_or_raise(event_id)
        urls = event.media_urls()
        if known_media_urls is not None:
            # Only media owned by this event may be deleted
            urls = [url for url in dict.fromkeys(known_media_urls) if url in urls]

        media = MediaSteps(self.media_store)
        delete_errors = await media.delete_best_effort(urls)
        await self.delete(event)
        return event_id, delete_errors
