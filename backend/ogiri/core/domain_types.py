"""Domain Types — identity aliases and enums shared by stores, handlers, and config.

Invariants:
    - ThemeId and AnswerId are opaque strings — never parsed, only compared
    - StoreBackend values match the STORE_BACKEND setting verbatim

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and env vars without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ThemeId = NewType("ThemeId", str)
AnswerId = NewType("AnswerId", str)


# ─── Enums ───────────────────────────────────────────────────────

class StoreBackend(str, Enum):
    """Which DataStore implementation backs the API."""
    MEMORY = "memory"
    JSON = "json"


class ResourceType(str, Enum):
    """Resource names used in error messages and log extras."""
    THEME = "Theme"
    ANSWER = "Answer"
