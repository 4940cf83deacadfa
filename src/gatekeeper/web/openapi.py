from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from gatekeeper.config import Config


def set_custom_openapi(app: FastAPI, title: str, summary: str, security_schemes: dict[str, Any]) -> None:
    """Publish the given security schemes alongside the generated schema."""

    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(title=title, version="0.1.0", summary=summary, routes=app.routes)
        components = openapi_schema.setdefault("components", {})
        components.setdefault("securitySchemes", {}).update(security_schemes)

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


def basic_security_schemes(config: Config) -> dict[str, Any]:
    return {
        "HTTPBasic": {
            "type": "http",
            "scheme": "basic",
            "description": f"Username and password sent as a Basic Authorization header, realm {config.basic_realm}",
        },
    }


def session_security_schemes(config: Config) -> dict[str, Any]:
    return {
        "SessionCookie": {
            "type": "apiKey",
            "in": "cookie",
            "name": config.session_cookie_name,
            "description": "Session token set by POST /login",
        },
    }


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Invalid credentials", "type": "authentication_error"},
                {"message": "No session cookie found", "type": "missing_credential"},
                {"message": "Invalid or expired session", "type": "authentication_error"},
                {"message": "Invalid username or password", "type": "access_denied"},
            ]
        }
    }
