import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from gatekeeper.errors import AccessDeniedError, AuthenticationError, MissingCredentialError

logger = structlog.get_logger(__name__)


def create_json_error_response(
    status_code: int, message: str, error_type: str | None = None, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    headers = None
    if isinstance(exc, MissingCredentialError):
        status_code = 401
        error_type = "missing_credential"
        if exc.challenge:
            headers = {"WWW-Authenticate": exc.challenge}
    elif isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, AccessDeniedError):
        status_code = 403
        error_type = "access_denied"
    else:
        raise TypeError(f"Unmapped user error: {type(exc).__name__}")

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type, headers=headers)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors, including database failures (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
