"""Boundary Protocols — the DataStore contract between handlers and storage.

Invariants:
    - Handlers depend only on DataStore, never on a concrete store
    - Every not-found condition raises ResourceNotFoundError
    - Every I/O or (de)serialization failure raises StorageError
    - Returned records are copies; callers may mutate them freely
    - list_* never raise for an empty or unknown parent — they return []

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: implementations block on locks and file I/O, and the API
      runs them on worker threads (one request per thread)
    - create/update return the stored record because the durable store assigns ids
      and stamps timestamps the caller cannot predict
"""

from typing import Protocol

from ogiri.core.domain_types import AnswerId, StoreBackend, ThemeId
from ogiri.schemas.answer import Answer
from ogiri.schemas.theme import Theme


class DataStore(Protocol):
    """Contract for theme/answer persistence — implemented by infrastructure."""
    backend: StoreBackend

    # Themes
    def get_theme(self, theme_id: ThemeId) -> Theme: ...
    def list_themes(self) -> list[Theme]: ...
    def create_theme(self, theme: Theme) -> Theme: ...
    def update_theme(self, theme: Theme) -> Theme: ...
    def delete_theme(self, theme_id: ThemeId) -> None: ...

    # Answers
    def get_answer(self, answer_id: AnswerId, theme_id: ThemeId) -> Answer: ...
    def list_answers(self, theme_id: ThemeId) -> list[Answer]: ...
    def create_answer(self, answer: Answer) -> Answer: ...
    def update_answer(self, answer: Answer) -> Answer: ...
    def delete_answer(self, answer_id: AnswerId, theme_id: ThemeId) -> None: ...
