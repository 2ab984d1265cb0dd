"""Dependency injection (auth, store)"""

from uuid import UUID

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.core.exceptions import AuthenticationError
from ledger.core.security import verify_token
from ledger.database import get_db
from ledger.services.ledger_store import LedgerStore
from ledger.services.sql_ledger_store import SqlLedgerStore

# Tokens are issued elsewhere; tokenUrl only documents the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/token")


async def get_current_user_id(token: str = Depends(oauth2_scheme)) -> UUID:
    """
    Get the authenticated user's ID from the bearer token.

    Args:
        token: JWT access token

    Returns:
        User ID from the token subject

    Raises:
        AuthenticationError: If the token is invalid
    """
    try:
        payload = verify_token(token)
        user_id_str = payload.get("sub")

        if user_id_str is None:
            raise AuthenticationError("Could not validate credentials")

        return UUID(user_id_str)
    except (JWTError, ValueError):
        raise AuthenticationError("Could not validate credentials")


async def get_ledger_store(db: AsyncSession = Depends(get_db)) -> LedgerStore:
    """
    Get the ledger store for the request's database session.

    Args:
        db: Database session

    Returns:
        LedgerStore
    """
    return SqlLedgerStore(db)
