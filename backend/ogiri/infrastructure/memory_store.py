"""In-Memory Store — volatile DataStore, lost on process restart.

Invariants:
    - Answers indexed theme_id → answer_id → Answer: scoped lookups never scan
    - One ReadWriteLock per resource class (themes, answers); reads shared, writes exclusive
    - Lock order is always themes then answers (create_answer holds both)
    - Deleting a theme does NOT remove its answers — they stay in the theme's bucket
    - Caller-supplied ids and timestamps are kept; only blanks are filled in
    - created_at of a stored record never changes through update

Design Decisions:
    - Copies in, copies out: callers can never mutate stored records outside the lock
    - No cascade on delete: matches the API-facing behavior clients already see
      (list answers of a deleted theme is rejected upstream by the theme check)
"""

import logging

from ogiri.core.domain_types import (
    AnswerId,
    ResourceType,
    StoreBackend,
    ThemeId,
)
from ogiri.core.errors import DuplicateRecordError, ResourceNotFoundError
from ogiri.core.id_generator import generate_id
from ogiri.core.timestamps import utc_now
from ogiri.infrastructure.rw_lock import ReadWriteLock
from ogiri.schemas.answer import Answer
from ogiri.schemas.theme import Theme

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Process-memory DataStore."""

    backend = StoreBackend.MEMORY

    def __init__(self):
        self._themes: dict[str, Theme] = {}
        self._answers: dict[str, dict[str, Answer]] = {}
        self._themes_lock = ReadWriteLock()
        self._answers_lock = ReadWriteLock()

    # ─── Themes ──────────────────────────────────────────────────

    def get_theme(self, theme_id: ThemeId) -> Theme:
        with self._themes_lock.read():
            theme = self._themes.get(theme_id)
            if theme is None:
                raise ResourceNotFoundError(ResourceType.THEME.value, theme_id)
            return theme.model_copy()

    def list_themes(self) -> list[Theme]:
        with self._themes_lock.read():
            return [t.model_copy() for t in self._themes.values()]

    def create_theme(self, theme: Theme) -> Theme:
        now = utc_now()
        stored = theme.model_copy(update={
            "id": theme.id or generate_id(),
            "created_at": theme.created_at or now,
            "updated_at": theme.updated_at or now,
        })
        with self._themes_lock.write():
            if stored.id in self._themes:
                raise DuplicateRecordError(ResourceType.THEME.value, stored.id)
            self._themes[stored.id] = stored
        logger.debug("Theme created", extra={"theme_id": stored.id})
        return stored.model_copy()

    def update_theme(self, theme: Theme) -> Theme:
        with self._themes_lock.write():
            existing = self._themes.get(theme.id)
            if existing is None:
                raise ResourceNotFoundError(ResourceType.THEME.value, theme.id)
            stored = theme.model_copy(update={"created_at": existing.created_at})
            self._themes[theme.id] = stored
        return stored.model_copy()

    def delete_theme(self, theme_id: ThemeId) -> None:
        with self._themes_lock.write():
            if theme_id not in self._themes:
                raise ResourceNotFoundError(ResourceType.THEME.value, theme_id)
            del self._themes[theme_id]
        logger.debug("Theme deleted", extra={"theme_id": theme_id})

    # ─── Answers ─────────────────────────────────────────────────

    def get_answer(self, answer_id: AnswerId, theme_id: ThemeId) -> Answer:
        with self._answers_lock.read():
            answer = self._answers.get(theme_id, {}).get(answer_id)
            if answer is None:
                raise ResourceNotFoundError(ResourceType.ANSWER.value, answer_id)
            return answer.model_copy()

    def list_answers(self, theme_id: ThemeId) -> list[Answer]:
        with self._answers_lock.read():
            bucket = self._answers.get(theme_id, {})
            return [a.model_copy() for a in bucket.values()]

    def create_answer(self, answer: Answer) -> Answer:
        now = utc_now()
        stored = answer.model_copy(update={
            "id": answer.id or generate_id(),
            "created_at": answer.created_at or now,
            "updated_at": answer.updated_at or now,
        })
        with self._themes_lock.read():
            if stored.theme_id not in self._themes:
                raise ResourceNotFoundError(
                    ResourceType.THEME.value, stored.theme_id,
                )
            with self._answers_lock.write():
                bucket = self._answers.setdefault(stored.theme_id, {})
                if stored.id in bucket:
                    raise DuplicateRecordError(ResourceType.ANSWER.value, stored.id)
                bucket[stored.id] = stored
        logger.debug(
            "Answer created",
            extra={"theme_id": stored.theme_id, "answer_id": stored.id},
        )
        return stored.model_copy()

    def update_answer(self, answer: Answer) -> Answer:
        with self._answers_lock.write():
            bucket = self._answers.get(answer.theme_id, {})
            existing = bucket.get(answer.id)
            if existing is None:
                raise ResourceNotFoundError(ResourceType.ANSWER.value, answer.id)
            stored = answer.model_copy(update={"created_at": existing.created_at})
            bucket[answer.id] = stored
        return stored.model_copy()

    def delete_answer(self, answer_id: AnswerId, theme_id: ThemeId) -> None:
        with self._answers_lock.write():
            bucket = self._answers.get(theme_id, {})
            if answer_id not in bucket:
                raise ResourceNotFoundError(ResourceType.ANSWER.value, answer_id)
            del bucket[answer_id]
        logger.debug(
            "Answer deleted", extra={"theme_id": theme_id, "answer_id": answer_id},
        )
