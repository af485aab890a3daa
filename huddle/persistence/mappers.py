"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from pydantic import BaseModel

from huddle.domain.model import ActivityRecord, Carpool, Comment, Post
from huddle.domain.value import (
    ActivityId,
    ActivityOptions,
    CarpoolId,
    CarpoolOptions,
    CommentId,
    CommentOptions,
    PostId,
    PostOptions,
    TargetId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _uuids(values: Any) -> list[UUID]:
    return [_uuid(v) for v in values or []]


def _to_row(model: BaseModel) -> Dict[str, Any]:
    """Dump a model for insertion; options go to JSONB, so they dump as JSON."""
    row = model.model_dump(exclude={"options"})
    row["options"] = model.options.model_dump(mode="json")
    return row


def row_to_activity(row: Dict[str, Any]) -> ActivityRecord:
    """Convert database row to the stored Activity record.

    Args:
        row: Database row as dict

    Returns:
        ActivityRecord including the join code
    """
    return ActivityRecord(
        id=ActivityId(_uuid(row["id"])),
        name=row["name"],
        join_code=row["join_code"],
        creator=UserId(_uuid(row["creator"])),
        managers=[UserId(u) for u in _uuids(row["managers"])],
        members=[UserId(u) for u in _uuids(row["members"])],
        carpools=[CarpoolId(c) for c in _uuids(row["carpools"])],
        options=ActivityOptions.model_validate(row.get("options") or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def activity_to_dict(activity: ActivityRecord) -> Dict[str, Any]:
    """Convert Activity record to database dict.

    Args:
        activity: Stored activity

    Returns:
        Dict suitable for database insertion/update
    """
    return _to_row(activity)


def row_to_carpool(row: Dict[str, Any]) -> Carpool:
    """Convert database row to Carpool domain model."""
    return Carpool(
        id=CarpoolId(_uuid(row["id"])),
        name=row["name"],
        target=TargetId(_uuid(row["target"])),
        driver=UserId(_uuid(row["driver"])),
        members=[UserId(u) for u in _uuids(row["members"])],
        options=CarpoolOptions.model_validate(row.get("options") or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def carpool_to_dict(carpool: Carpool) -> Dict[str, Any]:
    return _to_row(carpool)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author=UserId(_uuid(row["author"])),
        content=row["content"],
        target=TargetId(_uuid(row["target"])),
        root=TargetId(_uuid(row["root"])),
        options=CommentOptions.model_validate(row.get("options") or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return _to_row(comment)


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author=UserId(_uuid(row["author"])),
        content=row["content"],
        options=PostOptions.model_validate(row.get("options") or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    return _to_row(post)


def fields_to_values(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a partial update into column values.

    Options records become JSON-safe dicts for the JSONB column.
    """
    return {
        key: value.model_dump(mode="json") if isinstance(value, BaseModel) else value
        for key, value in fields.items()
    }
