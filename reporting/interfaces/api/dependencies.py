"""FastAPI dependency utilities."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from reporting.domain.entities import Principal
from reporting.domain.messages import ERROR_PERMISSION_MISSING, render_message
from reporting.infrastructure.security import RIGHTS_CLAIM, decode_access_token

TEMPLATES_EDIT_RIGHT = "REPORT_TEMPLATES_EDIT"

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Credenciales inválidas") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_principal(token: str) -> Principal:
    """Resolve the caller described by the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    subject = payload.get("sub")
    rights = payload.get(RIGHTS_CLAIM, [])
    if not isinstance(subject, str) or not subject:
        raise _unauthorized()
    if not isinstance(rights, list) or not all(isinstance(right, str) for right in rights):
        raise _unauthorized()

    return Principal(subject=subject, rights=frozenset(rights))


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal:
    """Return the authenticated caller from the bearer token."""

    if credentials is None:
        raise _unauthorized("No autenticado")
    return resolve_principal(credentials.credentials)


def require_right(right: str) -> Callable[..., Principal]:
    """Build a dependency ensuring the caller holds ``right``."""

    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_right(right):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=render_message(ERROR_PERMISSION_MISSING, right),
            )
        return principal

    return dependency


__all__ = [
    "TEMPLATES_EDIT_RIGHT",
    "get_current_principal",
    "require_right",
    "resolve_principal",
]
