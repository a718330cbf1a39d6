"""
Authentication Utility - JWT, password handling and the role gate.

Provides:
- Password hashing with bcrypt
- JWT session token creation/verification
- Session resolution from a Bearer header or the session cookie
- ``require_roles`` - the one dependency every protected route uses
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from nexus_admin.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer token extractor (optional: browsers send the cookie instead)
bearer_scheme = HTTPBearer(auto_error=False)

# Role allow-lists. "hr" and "editor" are accepted from tokens issued by
# staff tooling even though user accounts are created with the five core roles.
STAFF = ("admin", "manager")
HIRING = ("admin", "manager", "hr")
EDITORIAL = ("admin", "manager", "editor")
TRAINING_STAFF = ("admin", "instructor", "manager")


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_session_token(user: dict) -> str:
    """Session token for a stored user document; the role travels in the payload."""
    return create_access_token(data={
        "sub": str(user["_id"]),
        "email": user["email"],
        "role": user.get("role", "user"),
    })


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def resolve_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Optional[dict]:
    """
    FastAPI dependency - resolve the request to a session or None (anonymous).

    Returns ``{"id", "email", "role"}``.
    """
    token = credentials.credentials if credentials else request.cookies.get(settings.session_cookie_name)
    if not token:
        return None

    payload = decode_token(token)
    if not payload or not payload.get("sub"):
        return None

    return {
        "id": payload["sub"],
        "email": payload.get("email"),
        "role": payload.get("role", "user"),
    }


async def get_current_user(session: Optional[dict] = Depends(resolve_session)) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @app.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


def require_roles(*roles: str):
    """
    Dependency factory - 401 without a session, 403 when the role is not allowed.

    Usage:
        @router.post("", dependencies=[Depends(require_roles(*STAFF))])
        async def route(user: dict = Depends(require_roles("admin"))): ...
    """
    allowed = frozenset(roles)

    async def role_gate(user: dict = Depends(get_current_user)) -> dict:
        if user["role"] not in allowed:
            logger.warning(
                "Denied %s (role=%s); requires one of %s",
                user.get("email"), user["role"], sorted(allowed)
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return user

    return role_gate
