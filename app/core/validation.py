"""Validation helpers shared by every create and update path.

Schemas are declared with pydantic (see app/schemas). These helpers turn
pydantic failures and upload size/type checks into the field-level
``ValidationError`` raised before any storage or network call.
"""

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import FieldViolation, ValidationError
from app.storage.base import MediaFile, MediaKind

SchemaType = TypeVar("SchemaType", bound=BaseModel)

_VALUE_ERROR_PREFIX = "Value error, "


def violations_from(exc: PydanticValidationError) -> list[FieldViolation]:
    """Convert a pydantic error into one violation per offending field."""
    violations: list[FieldViolation] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        if field in seen:
            continue
        seen.add(field)
        message = error["msg"]
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        violations.append(FieldViolation(field=field, message=message))
    return violations


def keyed_by_alias(schema: type[BaseModel], data: Mapping[str, Any]) -> dict[str, Any]:
    """Key submitted values by their field alias, dropping unset values.

    Violations are reported under the key the value was given with, so
    values keyed by alias keep error fields consistent with the form names.
    """
    aliases = {
        name: field.alias
        for name, field in schema.model_fields.items()
        if field.alias
    }
    return {
        aliases.get(key, key): value
        for key, value in data.items()
        if value is not None
    }


def validate_fields(schema: type[SchemaType], data: Mapping[str, Any]) -> SchemaType:
    """Validate raw input against a schema.

    Raises:
        ValidationError: With every field-level violation found.
    """
    try:
        return schema.model_validate(dict(data))
    except PydanticValidationError as e:
        raise ValidationError(violations_from(e)) from e


def check_media_file(
    file: MediaFile,
    field: str,
    kind: MediaKind,
    max_size: int | None,
) -> FieldViolation | None:
    """Check an uploaded file against its expected kind and size limit."""
    expected_prefix = f"{kind.value}/"
    if not (file.content_type or "").startswith(expected_prefix):
        return FieldViolation(
            field=field,
            message=f"{file.filename} is not a valid {kind.value} file",
        )
    if max_size is not None and file.size > max_size:
        limit_mib = max_size / (1024 * 1024)
        return FieldViolation(
            field=field,
            message=(
                f"{file.filename} exceeds the maximum allowed size of "
                f"{limit_mib:g}MB"
            ),
        )
    return None


def check_media_files(
    checks: list[tuple[MediaFile | None, str, MediaKind, int | None]],
) -> None:
    """Run ``check_media_file`` over several uploads.

    Each entry is ``(file, field, kind, max_size)``; ``None`` files are skipped.

    Raises:
        ValidationError: If any file violates its constraints.
    """
    violations = []
    for file, field, kind, max_size in checks:
        if file is None:
            continue
        violation = check_media_file(file, field, kind, max_size)
        if violation:
            violations.append(violation)
    if violations:
        raise ValidationError(violations)
