from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from src.schemas.auth import LoginRequest, TokenResponse
from src.services.authentication import AuthenticationService

router = APIRouter(prefix="/auth", tags=["Auth"])


def get_authentication_service() -> AuthenticationService:
    return AuthenticationService()


# PUBLIC_INTERFACE
@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login",
    description="Authenticate the administrator with a JSON body and receive an access token.",
)
async def login(
    payload: LoginRequest,
    service: AuthenticationService = Depends(get_authentication_service),
) -> TokenResponse:
    """Issue an access token for the administrator."""
    return TokenResponse(access_token=service.login(payload.password))


# PUBLIC_INTERFACE
@router.post(
    "/token",
    response_model=TokenResponse,
    summary="Login (OAuth2 form)",
    description="OAuth2 password flow used by the interactive docs. The username is ignored.",
)
async def login_for_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthenticationService = Depends(get_authentication_service),
) -> TokenResponse:
    """Issue an access token from an OAuth2 password form."""
    return TokenResponse(access_token=service.login(form_data.password))
