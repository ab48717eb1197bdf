"""Answer Schemas — stored record plus submit/update payloads.

Invariants:
    - Answer.likes is never negative
    - AnswerCreate has no theme_id: the parent always comes from the URL path
    - AnswerUpdate.likes == 0 means "keep", so likes can be raised but never reset
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Answer(BaseModel):
    """A submission to exactly one theme."""
    id: str = ""
    theme_id: str = ""
    content: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: str = ""
    likes: int = Field(0, ge=0)


class AnswerCreate(BaseModel):
    """Answer submission payload."""
    content: str = ""
    created_by: str = ""


class AnswerUpdate(BaseModel):
    """Answer update payload — zero values keep the stored value."""
    content: str = ""
    likes: int = Field(0, ge=0)
