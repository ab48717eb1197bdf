"""Theme Schemas — stored record plus create/update payloads for API boundaries.

Invariants:
    - Theme is the single shape for storage, persistence, and responses
    - ThemeCreate carries only client-settable fields; id, timestamps, active are server-side
    - ThemeUpdate.active is None when omitted, so omission never deactivates a theme

Design Decisions:
    - title stays a plain str (not min_length): emptiness is checked by the handler so the
      400 body names the field, and an empty title in ThemeUpdate means "keep"
"""

from datetime import datetime

from pydantic import BaseModel


class Theme(BaseModel):
    """A prompt that answers are submitted against."""
    id: str = ""
    title: str = ""
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: str = ""
    active: bool = True


class ThemeCreate(BaseModel):
    """Theme creation payload."""
    title: str = ""
    description: str = ""
    created_by: str = ""


class ThemeUpdate(BaseModel):
    """Theme update payload — empty strings keep the stored value."""
    title: str = ""
    description: str = ""
    active: bool | None = None
