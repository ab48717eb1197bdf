"""Update Merging & Payload Checks — pure rules applied by the handlers before any store call.

Invariants:
    - merge_* are PURE: return a new record, never mutate `current`
    - Empty strings and zero likes in an update payload keep the stored value
    - ThemeUpdate.active applies only when the client sent it (not None)
    - id, theme_id, created_at, created_by never change through an update
    - check_* raise ValidationError before anything reaches the store

Design Decisions:
    - Zero-value sentinels kept for title/description/content/likes: existing clients send
      full records back and rely on blanks being ignored (a field cannot be cleared)
    - Explicit optional for active: a bool has no usable zero sentinel
"""

from datetime import datetime

from ogiri.core.errors import ValidationError
from ogiri.core.timestamps import advance
from ogiri.schemas.answer import Answer, AnswerUpdate
from ogiri.schemas.theme import Theme, ThemeUpdate


def check_title(title: str) -> None:
    if title == "":
        raise ValidationError("title is required", field="title")


def check_content(content: str) -> None:
    if content == "":
        raise ValidationError("content is required", field="content")


def merge_theme_update(
    current: Theme, patch: ThemeUpdate, now: datetime | None = None,
) -> Theme:
    """Apply non-empty fields of `patch` over `current`."""
    changes: dict = {"updated_at": advance(current.updated_at, now)}
    if patch.title != "":
        changes["title"] = patch.title
    if patch.description != "":
        changes["description"] = patch.description
    if patch.active is not None:
        changes["active"] = patch.active
    return current.model_copy(update=changes)


def merge_answer_update(
    current: Answer, patch: AnswerUpdate, now: datetime | None = None,
) -> Answer:
    """Apply non-empty content and positive likes of `patch` over `current`."""
    changes: dict = {"updated_at": advance(current.updated_at, now)}
    if patch.content != "":
        changes["content"] = patch.content
    if patch.likes > 0:
        changes["likes"] = patch.likes
    return current.model_copy(update=changes)
