from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gatekeeper.app import App
from gatekeeper.config import Config
from gatekeeper.core.modules.credential.provider import CredentialProvider
from gatekeeper.errors import UserError
from gatekeeper.web.error_handlers import general_exception_handler, user_error_handler
from gatekeeper.web.openapi import basic_security_schemes, session_security_schemes, set_custom_openapi
from gatekeeper.web.routers import auth_router, basic_router, profile_router


def _configure_common(app: FastAPI, config: Config) -> None:
    """Middleware, health check and error handlers shared by both services."""
    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)


def create_basic_app(config: Config) -> FastAPI:
    """Create the Basic-Auth service. It keeps no state and needs no database."""
    app = FastAPI(title="Gatekeeper Basic-Auth")
    app.state.config = config
    app.state.credentials = CredentialProvider.from_config(config)

    app.include_router(basic_router)
    _configure_common(app, config)
    set_custom_openapi(app, "Gatekeeper Basic-Auth", "HTTP Basic Authentication demo", basic_security_schemes(config))
    return app


def create_session_app(app_instance: App, config: Config) -> FastAPI:
    """Create the cookie-session service backed by MongoDB."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        async with app_instance.lifespan():
            yield

    app = FastAPI(title="Gatekeeper Session-Auth", lifespan=lifespan)
    app.state.app = app_instance
    app.state.config = config

    app.include_router(auth_router)
    app.include_router(profile_router)
    _configure_common(app, config)
    set_custom_openapi(
        app, "Gatekeeper Session-Auth", "Cookie session authentication demo", session_security_schemes(config)
    )
    return app
