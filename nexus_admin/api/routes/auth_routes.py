"""
Authentication Routes

POST /auth/register - Register new user account
POST /auth/login - Login, get JWT token and session cookie
POST /auth/logout - Clear the session cookie
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, Depends, Response

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import create_session_token, get_current_user
from nexus_admin.core.config import get_settings
from nexus_admin.schemas.schemas import LoginRequest, RegisterRequest, TokenResponse
from nexus_admin.services.user_service import UserService

settings = get_settings()

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", status_code=201)
async def register(request: RegisterRequest):
    """
    Register a new user account.

    Self-registered accounts always get the ``user`` role.
    """
    service = UserService()
    user = service.create(request.name, request.email, request.password, role="user")
    return ok(service.to_response(user), message="Registered successfully. Please login.")


@router.post("/login")
async def login(request: LoginRequest, response: Response):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    Browsers can rely on the httponly session cookie instead.
    """
    service = UserService()
    user = service.authenticate(request.email, request.password)
    token = create_session_token(user)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        samesite="lax",
        max_age=settings.jwt_expire_minutes * 60,
    )
    return ok({
        **TokenResponse(access_token=token, user_id=str(user["_id"]), role=user.get("role", "user")).model_dump(),
        "user": service.to_response(user),
    })


@router.post("/logout")
async def logout(response: Response):
    response.delete_cookie(settings.session_cookie_name)
    return ok(message="Logged out")


@router.get("/me")
async def get_me(user: dict = Depends(get_current_user)):
    """Get current user's account."""
    return ok(UserService().me(user["id"]))
