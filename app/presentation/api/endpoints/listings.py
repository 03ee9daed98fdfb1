"""Listing CRUD endpoints.

Request bodies are decoded by hand so a malformed body is reported as
"Invalid JSON format" in the error envelope rather than as a framework
validation error.
"""

from fastapi import APIRouter, Depends, Header, Path, Request, Response, status
from fastapi.responses import JSONResponse

from app.application.schemas import (
    ErrorResponse,
    MAX_ID,
    ListingCollection,
    ListingCollectionEnvelope,
    ListingEnvelope,
    ListingResponse,
)
from app.application.services import ListingService
from app.domain.entities import Listing
from app.domain.result import Failure
from app.infrastructure.dependencies import get_listing_service
from app.presentation.api.errors import INVALID_JSON, error_response, failure_response
from app.presentation.api.json_body import read_json_object

router = APIRouter(prefix="/listings", tags=["Listings"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


# ── Helpers ──────────────────────────────────────────────────────────


def _listing_envelope(listing: Listing, status_code: int) -> JSONResponse:
    body = ListingEnvelope(data=ListingResponse.from_entity(listing))
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ── Endpoints ────────────────────────────────────────────────────────


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_201_CREATED: {"model": ListingEnvelope}, **_ERRORS},
)
async def create_listing(
    request: Request,
    x_user_email: str | None = Header(None, description="Owner, set by the auth layer"),
    service: ListingService = Depends(get_listing_service),
) -> JSONResponse:
    """Create a new listing owned by the requesting user."""
    data = await read_json_object(request)
    if data is None:
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_JSON)

    result = await service.create_listing(data, owner_email=x_user_email)
    if isinstance(result, Failure):
        return failure_response(result.error)
    return _listing_envelope(result.value, status.HTTP_201_CREATED)


@router.get(
    "",
    responses={status.HTTP_200_OK: {"model": ListingCollectionEnvelope}, **_ERRORS},
)
async def get_listings(
    request: Request,
    service: ListingService = Depends(get_listing_service),
) -> JSONResponse:
    """List listings filtered by optional query parameters.

    Example: ``/api/listings?section_id=1&city_id=1&days_back=30&excluded_user_id=1``

    - ``section_id``: only listings in this section
    - ``city_id``: only listings in this city
    - ``days_back``: only listings published within the last N days
    - ``excluded_user_id``: drop listings owned by this user

    All keys are optional and combine with AND.
    """
    result = await service.get_listings(request.query_params)
    if isinstance(result, Failure):
        return failure_response(result.error)

    body = ListingCollectionEnvelope(
        data=ListingCollection(
            listings=[ListingResponse.from_entity(listing) for listing in result.value]
        )
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())


@router.get(
    "/{listing_id}",
    responses={status.HTTP_200_OK: {"model": ListingEnvelope}, **_ERRORS},
)
async def get_listing(
    listing_id: int = Path(..., le=MAX_ID),
    service: ListingService = Depends(get_listing_service),
) -> JSONResponse:
    """Retrieve a single listing by ID."""
    result = await service.get_listing(listing_id)
    if isinstance(result, Failure):
        return failure_response(result.error)
    return _listing_envelope(result.value, status.HTTP_200_OK)


@router.put(
    "/{listing_id}",
    responses={status.HTTP_200_OK: {"model": ListingEnvelope}, **_ERRORS},
)
async def update_listing(
    request: Request,
    listing_id: int = Path(..., le=MAX_ID),
    service: ListingService = Depends(get_listing_service),
) -> JSONResponse:
    """Update the fields present in the body; others keep their values."""
    found = await service.get_listing(listing_id)
    if isinstance(found, Failure):
        return failure_response(found.error)

    data = await read_json_object(request)
    if data is None:
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_JSON)

    result = await service.update_listing(found.value, data)
    if isinstance(result, Failure):
        return failure_response(result.error)
    return _listing_envelope(result.value, status.HTTP_200_OK)


@router.delete(
    "/{listing_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERRORS,
)
async def delete_listing(
    listing_id: int = Path(..., le=MAX_ID),
    service: ListingService = Depends(get_listing_service),
) -> Response:
    """Delete a listing by ID."""
    found = await service.get_listing(listing_id)
    if isinstance(found, Failure):
        return failure_response(found.error)

    result = await service.delete_listing(found.value)
    if isinstance(result, Failure):
        return failure_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
