from typing import Iterator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hardinfinity.auth import CallerIdentity, decode_caller
from hardinfinity.crud import upsert_user
from hardinfinity.errors import UnauthorizedError
from hardinfinity.models import User

security = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_caller(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> CallerIdentity:
    if not credentials:
        raise UnauthorizedError("Authorization header required")
    return decode_caller(credentials.credentials)


def get_current_user(caller: CallerIdentity = Depends(get_caller), db: Session = Depends(get_db)) -> User:
    return upsert_user(db, caller.subject, caller.email, caller.name)
