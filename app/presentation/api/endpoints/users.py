"""User endpoints — registration and lookup by email."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.application.schemas import ErrorResponse, UserEnvelope, UserResponse
from app.application.services import UserService
from app.domain.entities import User
from app.domain.result import Failure
from app.infrastructure.dependencies import get_user_service
from app.presentation.api.errors import INVALID_JSON, error_response, failure_response
from app.presentation.api.json_body import read_json_object

router = APIRouter(prefix="/users", tags=["Users"])


def _user_envelope(user: User, status_code: int) -> JSONResponse:
    body = UserEnvelope(data=UserResponse.model_validate(user, from_attributes=True))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_201_CREATED: {"model": UserEnvelope},
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    },
)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Register a user from ``{"email": ..., "password": ...}``."""
    data = await read_json_object(request)
    if data is None:
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_JSON)

    result = await service.create_user(data)
    if isinstance(result, Failure):
        return failure_response(result.error)
    return _user_envelope(result.value, status.HTTP_201_CREATED)


@router.get(
    "/{email}",
    responses={
        status.HTTP_200_OK: {"model": UserEnvelope},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def get_user(
    email: str,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Retrieve a user by exact email."""
    result = await service.get_user(email)
    if isinstance(result, Failure):
        return failure_response(result.error)
    return _user_envelope(result.value, status.HTTP_200_OK)
