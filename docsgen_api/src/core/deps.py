from __future__ import annotations

import logging
from typing import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.security import decode_token
from src.db.session import get_async_session
from src.repositories.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

# OAuth2 bearer (used by docs); login endpoint path referenced here
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


# PUBLIC_INTERFACE
async def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AsyncGenerator[UnitOfWork, None]:
    """
    Yield a UnitOfWork over the request-scoped session.

    Handlers commit explicitly; an exception raised inside the handler rolls
    the staged changes back.
    """
    async with UnitOfWork(session) as uow:
        yield uow


# PUBLIC_INTERFACE
async def get_current_admin(token: str = Depends(oauth2_scheme)) -> str:
    """
    Validate the bearer token and return its subject.

    Raises:
        HTTPException: 401 when the token is missing, invalid, expired or not an access token.
    """
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token)
    except JWTError:
        raise credentials_error

    subject = payload.get("sub")
    if not subject or payload.get("type") != "access":
        raise credentials_error
    return subject
