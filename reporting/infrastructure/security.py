"""Bearer token helpers.

Tokens are issued by the authentication service; this module only needs the
shared secret to verify them and read the caller's rights.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from reporting.config import get_settings

RIGHTS_CLAIM = "rights"


def create_access_token(
    subject: str, rights: list[str], expires_delta: timedelta | None = None
) -> str:
    settings = get_settings()
    expire = datetime.now(tz=timezone.utc) + (expires_delta or timedelta(minutes=30))
    claims = {"sub": subject, RIGHTS_CLAIM: list(rights), "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


__all__ = ["RIGHTS_CLAIM", "create_access_token", "decode_access_token"]
