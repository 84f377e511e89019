from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
from uuid import UUID

from app.core.exceptions import AuthenticationError
from app.core.security import decode_access_token

security = HTTPBearer(auto_error=False)

class AuthUser:
    """Represents the identity carried by a verified session token"""
    def __init__(self, user_id: str | UUID):
        try:
            self.id = UUID(user_id) if isinstance(user_id, str) else user_id
        except ValueError:
            raise AuthenticationError()
        self.id_str = str(self.id)

    def __str__(self):
        return f"AuthUser(id={self.id})"

def verify_token(token: str) -> AuthUser:
    """Decode a bearer token into an AuthUser without touching the database"""
    return AuthUser(user_id=decode_access_token(token))

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> AuthUser:
    """Extract and validate user from JWT token - Required authentication"""
    if not credentials or not credentials.credentials:
        raise AuthenticationError("Access denied. No token provided.")
    return verify_token(credentials.credentials)
