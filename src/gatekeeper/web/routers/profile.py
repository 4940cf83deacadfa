from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from gatekeeper.web.deps import SessionDep
from gatekeeper.web.openapi import ErrorResponse

router = APIRouter(tags=["profile"])


class ProfileResponse(BaseModel):
    """Greeting for the session owner."""

    message: str = Field(..., description="Greeting naming the user")
    user_id: str = Field(..., description="User ID")
    role: str = Field(..., description="Role attached to the session")
    expires_at: datetime = Field(..., description="Session expiry")


@router.get(
    "/profile",
    summary="Get current user profile",
    description="Requires a valid, unexpired session cookie.",
    operation_id="getProfile",
    openapi_extra={"security": [{"SessionCookie": []}]},
    responses={
        200: {"description": "Current user profile"},
        401: {"model": ErrorResponse, "description": "No session cookie, or session invalid or expired"},
    },
)
async def get_profile(session: SessionDep) -> ProfileResponse:
    return ProfileResponse(
        message=f"Welcome, user {session.user_id}! Your role is {session.role}.",
        user_id=session.user_id,
        role=session.role,
        expires_at=session.expires_at,
    )
