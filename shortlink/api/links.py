from fastapi import APIRouter, Depends

from shortlink.api.errors import error_response
from shortlink.core.errors import NOT_FOUND
from shortlink.models.schemas import (
    DeleteResponse,
    DeleteResult,
    ErrorResponse,
    LinkCreate,
    LinkResponse,
)
from shortlink.services.link_store import LinkStore, get_link_store

router = APIRouter(tags=["links"])

_backend_error = {503: {"model": ErrorResponse, "description": "Backend unavailable"}}


@router.post("/link", response_model=LinkResponse, status_code=201, responses=_backend_error)
def create_link(link_data: LinkCreate, store: LinkStore = Depends(get_link_store)):
    """Shorten a URL."""
    return LinkResponse(data=store.create(link_data.url))


@router.get(
    "/link/{code}",
    response_model=LinkResponse,
    responses={404: {"model": ErrorResponse, "description": "Code not found"}, **_backend_error},
)
def get_link(code: str, store: LinkStore = Depends(get_link_store)):
    """Resolve a code to its URL."""
    link = store.get(code)
    if link is None:
        return error_response(404, NOT_FOUND, f"Code not found: {code}")
    return LinkResponse(data=link)


@router.delete("/link/{code}", response_model=DeleteResponse, responses=_backend_error)
def delete_link(code: str, store: LinkStore = Depends(get_link_store)):
    """Delete a link. Acknowledged whether or not the code existed."""
    deleted = store.delete(code)
    return DeleteResponse(data=DeleteResult(code=code, deleted=deleted))
