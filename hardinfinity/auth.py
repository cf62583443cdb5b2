from dataclasses import dataclass
from typing import Optional

from jose import JWTError, jwt

from hardinfinity.config import settings
from hardinfinity.errors import UnauthorizedError


@dataclass(frozen=True)
class CallerIdentity:
    subject: str
    email: Optional[str] = None
    name: Optional[str] = None


def decode_caller(token: str) -> CallerIdentity:
    if not settings.AUTH_SECRET_KEY:
        raise UnauthorizedError("Authentication is not configured")

    options = {"verify_aud": bool(settings.AUTH_AUDIENCE)}
    try:
        payload = jwt.decode(
            token,
            settings.AUTH_SECRET_KEY,
            algorithms=[settings.AUTH_ALGORITHM],
            audience=settings.AUTH_AUDIENCE or None,
            options=options,
        )
    except JWTError as exc:
        raise UnauthorizedError("Invalid or expired token") from exc

    subject = payload.get("sub")
    if not subject:
        raise UnauthorizedError("Invalid token payload")
    return CallerIdentity(subject=str(subject), email=payload.get("email"), name=payload.get("name"))
