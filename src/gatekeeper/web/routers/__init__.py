from gatekeeper.web.routers.auth import router as auth_router
from gatekeeper.web.routers.basic import router as basic_router
from gatekeeper.web.routers.profile import router as profile_router

__all__ = [
    "auth_router",
    "basic_router",
    "profile_router",
]
