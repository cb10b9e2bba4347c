"""
Dependencies shared by the API routers.

Services live on ``app.state`` (see ``main.create_app``); these helpers
fetch them for a request so endpoints never import module-level
instances.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from ..core.localization import Language, localize, parse_language
from ..schemas.user import UserRead
from ..services.auth_service import AuthService
from ..services.directory_service import DirectoryService
from ..services.entity_store import EntityStore


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_directory(request: Request) -> DirectoryService:
    return request.app.state.directory


def get_auth(request: Request) -> AuthService:
    return request.app.state.auth


def get_language(request: Request, accept_language: Optional[str] = Header(None)) -> Language:
    """Language of the response, from ``Accept-Language``."""
    return parse_language(accept_language, request.app.state.default_language)


def require_user(
    auth: AuthService = Depends(get_auth),
    language: Language = Depends(get_language),
) -> UserRead:
    """Return the logged-in user or answer 401."""
    if not auth.is_authenticated or auth.current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=localize("auth_required", language),
        )
    return auth.current_user
