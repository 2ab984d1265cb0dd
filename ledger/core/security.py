"""JWT helpers"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import jwt

from ledger.config import get_settings

settings = get_settings()


def create_access_token(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed access token for a user.

    Tokens are normally issued by the identity service; this is used by the
    seed script and tests.

    Args:
        user_id: Subject of the token
        expires_delta: Lifetime, defaults to the configured expiry

    Returns:
        Encoded JWT
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify an access token.

    Args:
        token: Encoded JWT

    Returns:
        Token claims

    Raises:
        JWTError: If the token is invalid or expired
    """
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
