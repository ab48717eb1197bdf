"""Theme Handlers — list, get, create, update, delete themes against a DataStore.

Invariants:
    - create rejects an empty title BEFORE any store call (nothing persisted)
    - create generates the id and stamps timestamps; the durable store may override both
    - update is read → merge → full replace; empty payload fields keep stored values
    - Store errors propagate unchanged to the global error handler

Design Decisions:
    - Handler class holds the store: routes stay free of business logic
"""

import logging

from ogiri.core.domain_types import ThemeId
from ogiri.core.id_generator import generate_id
from ogiri.core.merge_updates import check_title, merge_theme_update
from ogiri.core.repository_protocols import DataStore
from ogiri.core.timestamps import utc_now
from ogiri.schemas.theme import Theme, ThemeCreate, ThemeUpdate

logger = logging.getLogger(__name__)


class ThemeHandlers:
    """Theme operations."""

    def __init__(self, store: DataStore):
        self.store = store

    def list_themes(self) -> list[Theme]:
        return self.store.list_themes()

    def get_theme(self, theme_id: ThemeId) -> Theme:
        return self.store.get_theme(theme_id)

    def create_theme(self, payload: ThemeCreate) -> Theme:
        """Validate, stamp, and store a new active theme."""
        check_title(payload.title)
        now = utc_now()
        theme = Theme(
            id=generate_id(),
            title=payload.title,
            description=payload.description,
            created_by=payload.created_by,
            created_at=now,
            updated_at=now,
            active=True,
        )
        created = self.store.create_theme(theme)
        logger.info("Theme submitted", extra={"theme_id": created.id})
        return created

    def update_theme(self, theme_id: ThemeId, payload: ThemeUpdate) -> Theme:
        """Merge `payload` into the stored theme and replace it."""
        current = self.store.get_theme(theme_id)
        return self.store.update_theme(merge_theme_update(current, payload))

    def delete_theme(self, theme_id: ThemeId) -> None:
        self.store.delete_theme(theme_id)
        logger.info("Theme removed", extra={"theme_id": theme_id})
