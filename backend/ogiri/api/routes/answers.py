"""Answer Routes — /themes/{theme_id}/answers collection and item endpoints.

Invariants:
    - The parent theme id always comes from the path, never the body
    - Routes never contain business logic (delegate to AnswerHandlers)
"""

from fastapi import APIRouter, Depends, Response, status

from ogiri.api.dependencies import get_answer_handlers
from ogiri.schemas.answer import Answer, AnswerCreate, AnswerUpdate
from ogiri.services.handle_answers import AnswerHandlers

router = APIRouter(prefix="/themes/{theme_id}/answers", tags=["answers"])


@router.get("", response_model=list[Answer])
def list_answers(
    theme_id: str, handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    """List answers of an existing theme (unordered)."""
    return handlers.list_answers(theme_id)


@router.post("", response_model=Answer, status_code=status.HTTP_201_CREATED)
def submit_answer(
    theme_id: str,
    body: AnswerCreate,
    handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    """Submit an answer to an active theme."""
    return handlers.submit_answer(theme_id, body)


@router.get("/{answer_id}", response_model=Answer)
def get_answer(
    theme_id: str,
    answer_id: str,
    handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    return handlers.get_answer(theme_id, answer_id)


@router.put("/{answer_id}", response_model=Answer)
def update_answer(
    theme_id: str,
    answer_id: str,
    body: AnswerUpdate,
    handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    """Update an answer; empty content and zero likes keep stored values."""
    return handlers.update_answer(theme_id, answer_id, body)


@router.delete(
    "/{answer_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_answer(
    theme_id: str,
    answer_id: str,
    handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    handlers.delete_answer(theme_id, answer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
