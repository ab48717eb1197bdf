"""JSON File Store — durable DataStore, whole-file rewrite on every mutation.

Invariants:
    - One ReadWriteLock guards all state AND file I/O: a write's in-memory effect and
      its file rewrite are atomic relative to other store calls
    - NOT atomic relative to a crash mid-write (no temp file, no fsync)
    - Ids are theme_<n> / answer_<n> from persisted counters; caller ids are ignored
    - The store stamps created_at/updated_at itself and forces active=True on create
    - Answers live in one flat map; scoped queries filter by theme_id
    - Deleting a theme deletes its answers
    - File missing at startup → empty store; unreadable, non-UTF-8 or corrupt → StorageError
    - Loaded counters are lifted past any theme_<n> / answer_<n> already on disk

Design Decisions:
    - Failed writes leave the in-memory change applied: the next successful write
      persists it, and callers get a 500 for the failed one
    - Pretty-printed UTF-8 with non-ASCII kept: the file is meant to be hand-readable
"""

import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from ogiri.core.domain_types import (
    AnswerId,
    ResourceType,
    StoreBackend,
    ThemeId,
)
from ogiri.core.errors import ResourceNotFoundError, StorageError
from ogiri.core.id_generator import (
    ANSWER_ID_PREFIX,
    THEME_ID_PREFIX,
    sequential_id,
)
from ogiri.core.timestamps import advance, utc_now
from ogiri.infrastructure.rw_lock import ReadWriteLock
from ogiri.schemas.answer import Answer
from ogiri.schemas.store_snapshot import StoreSnapshot
from ogiri.schemas.theme import Theme

logger = logging.getLogger(__name__)


class JSONStore:
    """File-backed DataStore."""

    backend = StoreBackend.JSON

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)
        self._lock = ReadWriteLock()
        self._themes: dict[str, Theme] = {}
        self._answers: dict[str, Answer] = {}
        self._next_theme_id = 1
        self._next_answer_id = 1
        self._load()

    # ─── Persistence ─────────────────────────────────────────────

    def _load(self) -> None:
        with self._lock.write():
            if not self.file_path.exists():
                logger.info(
                    f"No data file at {self.file_path}, starting empty",
                    extra={"backend": self.backend.value},
                )
                return
            try:
                raw = self.file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(
                    f"Failed to read {self.file_path}: {e}",
                    extra={"operation": "read"},
                )
                raise StorageError("read") from e
            try:
                snapshot = StoreSnapshot.model_validate_json(raw)
            except PydanticValidationError as e:
                logger.error(
                    f"Failed to parse {self.file_path}: {e}",
                    extra={"operation": "deserialize"},
                )
                raise StorageError("deserialize") from e
            self._themes = snapshot.themes
            self._answers = snapshot.answers
            self._next_theme_id = snapshot.next_theme_id
            self._next_answer_id = snapshot.next_answer_id
        logger.info(
            f"Loaded {len(self._themes)} themes and {len(self._answers)} answers "
            f"from {self.file_path}",
            extra={"backend": self.backend.value},
        )

    def _save(self) -> None:
        """Rewrite the whole file. Caller holds the write lock."""
        snapshot = StoreSnapshot(
            themes=self._themes,
            answers=self._answers,
            next_theme_id=self._next_theme_id,
            next_answer_id=self._next_answer_id,
        )
        try:
            data = snapshot.model_dump_json(indent=2)
        except ValueError as e:
            logger.error(f"Failed to serialize store: {e}", extra={"operation": "serialize"})
            raise StorageError("serialize") from e
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(data, encoding="utf-8")
        except OSError as e:
            logger.error(
                f"Failed to write {self.file_path}: {e}",
                extra={"operation": "write"},
            )
            raise StorageError("write") from e

    # ─── Themes ──────────────────────────────────────────────────

    def get_theme(self, theme_id: ThemeId) -> Theme:
        with self._lock.read():
            theme = self._themes.get(theme_id)
            if theme is None:
                raise ResourceNotFoundError(ResourceType.THEME.value, theme_id)
            return theme.model_copy()

    def list_themes(self) -> list[Theme]:
        with self._lock.read():
            return [t.model_copy() for t in self._themes.values()]

    def create_theme(self, theme: Theme) -> Theme:
        with self._lock.write():
            now = utc_now()
            stored = theme.model_copy(update={
                "id": sequential_id(THEME_ID_PREFIX, self._next_theme_id),
                "created_at": now,
                "updated_at": now,
                "active": True,
            })
            self._themes[stored.id] = stored
            self._next_theme_id += 1
            self._save()
        logger.info("Theme created", extra={"theme_id": stored.id})
        return stored.model_copy()

    def update_theme(self, theme: Theme) -> Theme:
        with self._lock.write():
            existing = self._themes.get(theme.id)
            if existing is None:
                raise ResourceNotFoundError(ResourceType.THEME.value, theme.id)
            stored = theme.model_copy(update={
                "created_at": existing.created_at,
                "updated_at": advance(existing.updated_at),
            })
            self._themes[theme.id] = stored
            self._save()
        return stored.model_copy()

    def delete_theme(self, theme_id: ThemeId) -> None:
        with self._lock.write():
            if theme_id not in self._themes:
                raise ResourceNotFoundError(ResourceType.THEME.value, theme_id)
            del self._themes[theme_id]
            orphaned = [
                answer_id for answer_id, answer in self._answers.items()
                if answer.theme_id == theme_id
            ]
            for answer_id in orphaned:
                del self._answers[answer_id]
            self._save()
        logger.info(
            f"Theme deleted with {len(orphaned)} answers",
            extra={"theme_id": theme_id},
        )

    # ─── Answers ─────────────────────────────────────────────────

    def get_answer(self, answer_id: AnswerId, theme_id: ThemeId) -> Answer:
        with self._lock.read():
            answer = self._answers.get(answer_id)
            if answer is None or answer.theme_id != theme_id:
                raise ResourceNotFoundError(ResourceType.ANSWER.value, answer_id)
            return answer.model_copy()

    def list_answers(self, theme_id: ThemeId) -> list[Answer]:
        with self._lock.read():
            return [
                a.model_copy() for a in self._answers.values()
                if a.theme_id == theme_id
            ]

    def create_answer(self, answer: Answer) -> Answer:
        with self._lock.write():
            if answer.theme_id not in self._themes:
                raise ResourceNotFoundError(ResourceType.THEME.value, answer.theme_id)
            now = utc_now()
            stored = answer.model_copy(update={
                "id": sequential_id(ANSWER_ID_PREFIX, self._next_answer_id),
                "created_at": now,
                "updated_at": now,
            })
            self._answers[stored.id] = stored
            self._next_answer_id += 1
            self._save()
        logger.info(
            "Answer created",
            extra={"theme_id": stored.theme_id, "answer_id": stored.id},
        )
        return stored.model_copy()

    def update_answer(self, answer: Answer) -> Answer:
        with self._lock.write():
            existing = self._answers.get(answer.id)
            if existing is None or existing.theme_id != answer.theme_id:
                raise ResourceNotFoundError(ResourceType.ANSWER.value, answer.id)
            stored = answer.model_copy(update={
                "created_at": existing.created_at,
                "updated_at": advance(existing.updated_at),
            })
            self._answers[answer.id] = stored
            self._save()
        return stored.model_copy()

    def delete_answer(self, answer_id: AnswerId, theme_id: ThemeId) -> None:
        with self._lock.write():
            answer = self._answers.get(answer_id)
            if answer is None or answer.theme_id != theme_id:
                raise ResourceNotFoundError(ResourceType.ANSWER.value, answer_id)
            del self._answers[answer_id]
            self._save()
        logger.info(
            "Answer deleted", extra={"theme_id": theme_id, "answer_id": answer_id},
        )
