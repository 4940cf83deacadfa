from datetime import datetime

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from gatekeeper.web.deps import AppDep, AuthTokenDep, ConfigDep
from gatekeeper.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    username: str = Field(..., description="Username for authentication")
    password: str = Field(..., description="Password for authentication")


class LoginResponse(BaseModel):
    """Authentication response."""

    message: str = Field(..., description="Human-readable result")
    user_id: str = Field(..., description="Authenticated user ID")
    role: str = Field(..., description="Role attached to the session")
    expires_at: datetime = Field(..., description="Moment the session stops being accepted")


class LogoutResponse(BaseModel):
    message: str = Field(..., description="Human-readable result")


@router.post(
    "/login",
    summary="Authenticate user",
    description="Check username and password and set the session cookie.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated, session cookie set"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, app: AppDep, config: ConfigDep, response: Response) -> LoginResponse:
    session = await app.login(login_data.username, login_data.password)

    # Client-side expiry mirrors the server-side one; the server stays authoritative
    response.set_cookie(
        key=config.session_cookie_name,
        value=session.token,
        httponly=True,
        samesite="lax",
        secure=config.cookie_secure,
        max_age=config.session_ttl_seconds,
    )

    return LoginResponse(
        message="Login successful", user_id=session.user_id, role=session.role, expires_at=session.expires_at
    )


@router.post(
    "/logout",
    summary="End session",
    description="Delete the current session, if any, and clear the cookie. Always succeeds.",
    operation_id="logout",
    responses={200: {"description": "Logged out"}},
)
async def logout(app: AppDep, config: ConfigDep, auth_token: AuthTokenDep, response: Response) -> LogoutResponse:
    await app.logout(auth_token)
    response.delete_cookie(config.session_cookie_name, httponly=True, samesite="lax", secure=config.cookie_secure)
    return LogoutResponse(message="Logged out")
