import base64
import binascii
from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security.utils import get_authorization_scheme_param

from gatekeeper.app import App
from gatekeeper.config import Config
from gatekeeper.core.modules.credential.models import Principal
from gatekeeper.core.modules.credential.provider import CredentialProvider
from gatekeeper.core.modules.session.models import AuthToken, Session
from gatekeeper.errors import ForbiddenError, MissingCredentialError

# Both gates read the request directly and raise UserError subclasses, so every
# failure goes through user_error_handler. Security schemes are published by
# web/openapi.py from the same config values.


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_credentials(request: Request) -> CredentialProvider:
    return cast(CredentialProvider, request.app.state.credentials)


async def get_auth_token(request: Request, config: Annotated[Config, Depends(get_config)]) -> AuthToken | None:
    """Read the session cookie, None only if the cookie is absent."""
    token = request.cookies.get(config.session_cookie_name)
    return None if token is None else AuthToken(token)


async def get_current_session(
    request: Request,
    app: Annotated[App, Depends(get_app)],
    auth_token: Annotated[AuthToken | None, Depends(get_auth_token)],
) -> Session:
    """Session gate: admit only requests carrying a live session cookie."""
    if auth_token is None:
        raise MissingCredentialError("No session cookie found")
    session = await app.get_session(auth_token)
    request.state.session = session
    return session


def parse_basic_authorization(header: str | None) -> tuple[str, str] | None:
    """Decode ``Basic base64(username:password)``.

    Returns None when the header is absent, uses another scheme, or cannot
    be decoded into a UTF-8 pair separated by a colon.
    """
    scheme, param = get_authorization_scheme_param(header)
    if not header or scheme.lower() != "basic":
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return username, password


async def require_basic_auth(
    request: Request,
    config: Annotated[Config, Depends(get_config)],
    credentials: Annotated[CredentialProvider, Depends(get_credentials)],
) -> Principal:
    """Basic-auth gate: 401 with a challenge when no usable header, 403 when the pair is wrong."""
    pair = parse_basic_authorization(request.headers.get("Authorization"))
    if pair is None:
        raise MissingCredentialError("Authentication required", challenge=f'Basic realm="{config.basic_realm}"')
    principal = credentials.authenticate(*pair)
    if principal is None:
        raise ForbiddenError("Invalid username or password")
    return principal


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ConfigDep = Annotated[Config, Depends(get_config)]
AuthTokenDep = Annotated[AuthToken | None, Depends(get_auth_token)]
SessionDep = Annotated[Session, Depends(get_current_session)]
BasicPrincipalDep = Annotated[Principal, Depends(require_basic_auth)]
