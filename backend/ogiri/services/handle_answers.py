"""Answer Handlers — list, get, submit, update, delete answers scoped to a theme.

Invariants:
    - list and submit check the parent theme first (404 if missing)
    - submit additionally requires theme.active (InactiveResourceError otherwise)
    - submit rejects empty content BEFORE any store call
    - New answers start with likes == 0; theme_id always comes from the path
    - update/get/delete with an answer owned by another theme → 404

Design Decisions:
    - Parent checks here, not in routes: the same rules apply whatever the transport
"""

import logging

from ogiri.core.domain_types import AnswerId, ResourceType, ThemeId
from ogiri.core.errors import InactiveResourceError
from ogiri.core.id_generator import generate_id
from ogiri.core.merge_updates import check_content, merge_answer_update
from ogiri.core.repository_protocols import DataStore
from ogiri.core.timestamps import utc_now
from ogiri.schemas.answer import Answer, AnswerCreate, AnswerUpdate

logger = logging.getLogger(__name__)


class AnswerHandlers:
    """Answer operations."""

    def __init__(self, store: DataStore):
        self.store = store

    def list_answers(self, theme_id: ThemeId) -> list[Answer]:
        self.store.get_theme(theme_id)
        return self.store.list_answers(theme_id)

    def get_answer(self, theme_id: ThemeId, answer_id: AnswerId) -> Answer:
        return self.store.get_answer(answer_id, theme_id)

    def submit_answer(self, theme_id: ThemeId, payload: AnswerCreate) -> Answer:
        """Store a new answer under an existing, active theme."""
        theme = self.store.get_theme(theme_id)
        if not theme.active:
            raise InactiveResourceError(ResourceType.THEME.value, theme_id)
        check_content(payload.content)
        now = utc_now()
        answer = Answer(
            id=generate_id(),
            theme_id=theme_id,
            content=payload.content,
            created_by=payload.created_by,
            created_at=now,
            updated_at=now,
            likes=0,
        )
        created = self.store.create_answer(answer)
        logger.info(
            "Answer submitted",
            extra={"theme_id": theme_id, "answer_id": created.id},
        )
        return created

    def update_answer(
        self, theme_id: ThemeId, answer_id: AnswerId, payload: AnswerUpdate,
    ) -> Answer:
        current = self.store.get_answer(answer_id, theme_id)
        return self.store.update_answer(merge_answer_update(current, payload))

    def delete_answer(self, theme_id: ThemeId, answer_id: AnswerId) -> None:
        self.store.delete_answer(answer_id, theme_id)
        logger.info(
            "Answer removed", extra={"theme_id": theme_id, "answer_id": answer_id},
        )
