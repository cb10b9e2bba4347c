"""
Authentication endpoints for API v1.

Registration, login and logout operate on the single session held by
the application's ``AuthService``.  Failures are answered with the
localized message of the authentication error.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from business_directory_api.app.api.deps import get_auth, get_language
from business_directory_api.app.core.errors import AuthError, AuthErrorKind
from business_directory_api.app.core.localization import Language
from business_directory_api.app.schemas.user import SessionRead, UserCreate, UserLogin
from business_directory_api.app.services.auth_service import AuthService

router = APIRouter()

ERROR_STATUS = {
    AuthErrorKind.invalid_credentials: status.HTTP_401_UNAUTHORIZED,
    AuthErrorKind.user_already_exists: status.HTTP_409_CONFLICT,
    AuthErrorKind.network_error: status.HTTP_503_SERVICE_UNAVAILABLE,
    AuthErrorKind.server_error: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _http_error(error: AuthError, language: Language) -> HTTPException:
    return HTTPException(status_code=ERROR_STATUS[error.kind], detail=error.message(language))


@router.post("/register", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    auth: AuthService = Depends(get_auth),
    language: Language = Depends(get_language),
) -> SessionRead:
    """Create an account and log it in.

    Returns 409 when the e-mail is already registered.
    """
    try:
        await auth.register(payload.email, payload.password, payload.full_name)
    except AuthError as e:
        raise _http_error(e, language) from e
    return auth.session()


@router.post("/login", response_model=SessionRead)
async def login(
    payload: UserLogin,
    auth: AuthService = Depends(get_auth),
    language: Language = Depends(get_language),
) -> SessionRead:
    """Open the session.  Unknown e-mail and wrong password both give 401."""
    try:
        await auth.login(payload.email, payload.password)
    except AuthError as e:
        raise _http_error(e, language) from e
    return auth.session()


@router.post("/logout", response_model=SessionRead)
async def logout(auth: AuthService = Depends(get_auth)) -> SessionRead:
    auth.logout()
    return auth.session()


@router.get("/session", response_model=SessionRead)
async def get_session(auth: AuthService = Depends(get_auth)) -> SessionRead:
    return auth.session()
