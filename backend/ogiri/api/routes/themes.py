"""Theme Routes — /themes collection and /themes/{theme_id} item endpoints.

Invariants:
    - Routes are plain `def`: each request runs on a worker thread, store calls block
    - Routes never contain business logic (delegate to ThemeHandlers)
    - DELETE answers 204 with an empty body
"""

from fastapi import APIRouter, Depends, Response, status

from ogiri.api.dependencies import get_theme_handlers
from ogiri.schemas.theme import Theme, ThemeCreate, ThemeUpdate
from ogiri.services.handle_themes import ThemeHandlers

router = APIRouter(prefix="/themes", tags=["themes"])


@router.get("", response_model=list[Theme])
def list_themes(handlers: ThemeHandlers = Depends(get_theme_handlers)):
    """List all themes (unordered)."""
    return handlers.list_themes()


@router.post("", response_model=Theme, status_code=status.HTTP_201_CREATED)
def create_theme(
    body: ThemeCreate, handlers: ThemeHandlers = Depends(get_theme_handlers),
):
    """Create a new, active theme."""
    return handlers.create_theme(body)


@router.get("/{theme_id}", response_model=Theme)
def get_theme(
    theme_id: str, handlers: ThemeHandlers = Depends(get_theme_handlers),
):
    return handlers.get_theme(theme_id)


@router.put("/{theme_id}", response_model=Theme)
def update_theme(
    theme_id: str,
    body: ThemeUpdate,
    handlers: ThemeHandlers = Depends(get_theme_handlers),
):
    """Update a theme; empty fields in the body keep their stored values."""
    return handlers.update_theme(theme_id, body)


@router.delete(
    "/{theme_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_theme(
    theme_id: str, handlers: ThemeHandlers = Depends(get_theme_handlers),
):
    handlers.delete_theme(theme_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
