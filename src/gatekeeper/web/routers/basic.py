from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from gatekeeper.web.deps import BasicPrincipalDep
from gatekeeper.web.openapi import ErrorResponse

router = APIRouter(tags=["basic"], default_response_class=PlainTextResponse)


@router.get("/", summary="Welcome page", operation_id="home")
async def home() -> str:
    return "Welcome! Visit /public or /secure."


@router.get("/public", summary="Public page", operation_id="publicPage")
async def public_page() -> str:
    return "This is a public page, no authentication needed."


@router.get(
    "/secure",
    summary="Protected page",
    description="Requires HTTP Basic credentials.",
    operation_id="securePage",
    openapi_extra={"security": [{"HTTPBasic": []}]},
    responses={
        200: {"description": "Credentials accepted"},
        401: {"model": ErrorResponse, "description": "No credentials supplied"},
        403: {"model": ErrorResponse, "description": "Wrong username or password"},
    },
)
async def secure_page(principal: BasicPrincipalDep) -> str:
    return f"Welcome {principal.username}, you have accessed a secure page."
