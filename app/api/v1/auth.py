"""Registration and login endpoints. Thin translation from HTTP to CredentialService."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_credential_service
from app.schemas.auth import ErrorResponse, LoginRequest, MessageResponse, RegisterRequest
from app.services.credential_service import CredentialService
from app.services.errors import Conflict, InvalidCredentials, ValidationError

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> MessageResponse:
    """
    Register a new account. Returns 400 for the first policy violation and
    409 if the username or email is already taken.
    """
    try:
        service.register(body.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except Conflict as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> MessageResponse:
    """Check a username/password pair. Unknown users and wrong passwords both get 401."""
    try:
        service.login(body.username, body.password)
    except InvalidCredentials as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    return MessageResponse(message="Login successful")
