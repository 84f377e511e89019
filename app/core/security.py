from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from app.core.config import settings
from app.core.exceptions import AuthenticationError

# bcrypt silently ignores input beyond this many bytes
BCRYPT_MAX_BYTES = 72


def hash_secret(secret: str) -> str:
    """Hash a password or security answer with a fresh salt."""
    return bcrypt.hashpw(
        secret.encode("utf-8"),
        bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS),
    ).decode("utf-8")


def verify_secret(secret: str, hashed: str) -> bool:
    """Compare a plaintext secret against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(secret.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed stored hash or over-long input
        return False


def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    """Issue a signed session token for the given user id."""
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))
    payload = {
        "sub": str(subject),
        "iat": int(issued_at.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> str:
    """
    Verify signature and expiry and return the token subject.

    Every failure (malformed, expired, bad signature, missing subject) is
    reported as the same AuthenticationError.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise AuthenticationError()

    subject = payload.get("sub")
    if not subject or "exp" not in payload:
        raise AuthenticationError()
    return subject
