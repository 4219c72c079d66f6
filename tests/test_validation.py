"""Tests for validation helpers, schemas and the video link normalizer."""

from datetime import datetime

import pytest

from app.core.errors import MediaUploadError, NotFoundError, ValidationError
from app.core.validation import check_media_file, validate_fields
from app.schemas.about_us import AboutUsFields
from app.schemas.billboard import BillboardFields
from app.schemas.event import EventFields
from app.schemas.result import OperationResult
from app.storage.base import MediaKind
from app.utils.video import to_embed_url
from conftest import EVENT_FIELDS, make_file


def test_event_fields_valid():
    """Valid input is parsed and stripped."""
    fields = validate_fields(EventFields, {**EVENT_FIELDS, "title": "  Feria  "})

    assert fields.title == "Feria"
    assert fields.start_date == datetime(2025, 1, 1, 10, 0)
    assert fields.end_date == datetime(2025, 1, 1, 12, 0)


def test_event_fields_equal_dates_allowed():
    """An event may end exactly when it starts."""
    fields = validate_fields(
        EventFields,
        {**EVENT_FIELDS, "endDate": EVENT_FIELDS["startDate"]},
    )

    assert fields.end_date == fields.start_date


def test_event_fields_end_before_start():
    """End before start is reported on endDate."""
    with pytest.raises(ValidationError) as exc_info:
        validate_fields(EventFields, {**EVENT_FIELDS, "endDate": "2024-12-31T23:00"})

    violations = exc_info.value.violations
    assert len(violations) == 1
    assert violations[0].field == "endDate"
    assert "earlier than the start date" in violations[0].message


def test_event_fields_timezone_normalized():
    """Aware timestamps are stored as naive UTC."""
    fields = validate_fields(
        EventFields,
        {
            **EVENT_FIELDS,
            "startDate": "2025-01-01T10:00:00+02:00",
            "endDate": "2025-01-01T09:30:00Z",
        },
    )

    assert fields.start_date == datetime(2025, 1, 1, 8, 0)
    assert fields.end_date == datetime(2025, 1, 1, 9, 30)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("title", "x" * 81),
        ("title", "   "),
        ("description", "x" * 151),
        ("address", "x" * 201),
        ("startDate", "not a date"),
    ],
)
def test_event_fields_bounds(field, value):
    """Length bounds and types are enforced per field."""
    with pytest.raises(ValidationError) as exc_info:
        validate_fields(EventFields, {**EVENT_FIELDS, field: value})

    assert [v.field for v in exc_info.value.violations] == [field]


def test_about_us_fields_bounds():
    """About-us descriptions allow up to 890 characters."""
    validate_fields(AboutUsFields, {"title": "Nosotros", "description": "x" * 890})

    with pytest.raises(ValidationError) as exc_info:
        validate_fields(AboutUsFields, {"title": "", "description": "x" * 891})

    assert {v.field for v in exc_info.value.violations} == {"title", "description"}


def test_billboard_fields_require_valid_link():
    """Billboards need a label and an http(s) link."""
    fields = validate_fields(
        BillboardFields,
        {"title": "Promo", "buttonLabel": "Ver más", "href": "https://example.com/promo"},
    )
    assert str(fields.href) == "https://example.com/promo"
    assert fields.description is None

    with pytest.raises(ValidationError) as exc_info:
        validate_fields(BillboardFields, {"title": "Promo", "href": "not-a-url"})

    assert {v.field for v in exc_info.value.violations} == {"buttonLabel", "href"}


def test_check_media_file_size_limit():
    """Files above the limit are rejected, files at the limit pass."""
    limit = 4 * 1024 * 1024

    assert check_media_file(make_file(size=limit), "image", MediaKind.IMAGE, limit) is None

    violation = check_media_file(make_file(size=limit + 1), "image", MediaKind.IMAGE, limit)
    assert violation.field == "image"
    assert "4MB" in violation.message


def test_check_media_file_kind():
    """Audio fields only accept audio content types."""
    violation = check_media_file(make_file("a.jpg"), "audio", MediaKind.AUDIO, None)

    assert violation.field == "audio"
    assert check_media_file(
        make_file("a.mp3", "audio/mpeg", size=50 * 1024 * 1024),
        "audio",
        MediaKind.AUDIO,
        None,
    ) is None


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.youtube.com/watch?v=abc123", "https://www.youtube.com/embed/abc123"),
        ("http://youtube.com/watch?v=abc_12-3&t=10s", "https://www.youtube.com/embed/abc_12-3"),
        ("youtu.be/abc123", "https://www.youtube.com/embed/abc123"),
        ("https://youtu.be/abc123?si=share", "https://www.youtube.com/embed/abc123"),
        ("https://vimeo.com/123", "https://vimeo.com/123"),
        ("https://www.youtube.com/embed/abc123", "https://www.youtube.com/embed/abc123"),
        ("", ""),
        (None, ""),
    ],
)
def test_to_embed_url(url, expected):
    """YouTube links become embed links, everything else passes through."""
    assert to_embed_url(url) == expected


def test_operation_result_mapping():
    """Domain errors keep their message; unknown errors get a generic one."""
    not_found = OperationResult.failed(NotFoundError("Event", "abc"))
    assert not_found.error == "Event not found"
    assert not_found.code == "NOT_FOUND"

    upload = OperationResult.failed(MediaUploadError("a.jpg", "timeout"))
    assert upload.code == "MEDIA_UPLOAD_FAILED"

    unknown = OperationResult.failed(RuntimeError("connection string leaked"))
    assert unknown.code == "UNKNOWN_ERROR"
    assert "leaked" not in unknown.error
