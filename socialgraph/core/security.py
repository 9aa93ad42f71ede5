# socialgraph/core/security.py

from datetime import datetime, timedelta, timezone
from typing import Union
from jose import jwt, JWTError

from socialgraph.core.config import settings

def create_access_token(data: dict, expires_delta: Union[timedelta, None] = None) -> str:
    """
    Mint a bearer token. `sub` carries the account id as a string.
    The identity service does this in production; tests and tooling use it too.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_account_id(token: str) -> Union[int, None]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    sub = payload.get("sub")
    if sub is None:
        return None
    try:
        return int(sub)
    except (TypeError, ValueError):
        return None
