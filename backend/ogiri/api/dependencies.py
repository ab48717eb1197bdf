"""Route Dependencies — hand the app-owned store to handler objects.

Invariants:
    - The store lives on app.state.store; nothing reaches it through module globals
    - A request arriving before the store exists is a programming error (RuntimeError → 500)
"""

from fastapi import Depends, Request

from ogiri.core.repository_protocols import DataStore
from ogiri.services.handle_answers import AnswerHandlers
from ogiri.services.handle_themes import ThemeHandlers


def get_store(request: Request) -> DataStore:
    """FastAPI dependency for the application's DataStore."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store


def get_theme_handlers(store: DataStore = Depends(get_store)) -> ThemeHandlers:
    return ThemeHandlers(store)


def get_answer_handlers(store: DataStore = Depends(get_store)) -> AnswerHandlers:
    return AnswerHandlers(store)
