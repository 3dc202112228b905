"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from snippet_vault.api.dependencies import get_credential_store, get_current_user, get_token_codec
from snippet_vault.config import Settings, get_settings
from snippet_vault.schemas.auth import AuthResponse, Principal, UserLogin, UserRegister
from snippet_vault.services.credentials import CredentialStore
from snippet_vault.services.tokens import TokenCodec

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=int(settings.token_ttl.total_seconds()),
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    response: Response,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Register a new user.

    A duplicate email raises DuplicateEmailError, answered with 409.
    """
    user = store.register(user_data.email, user_data.password, user_data.name)

    access_token = codec.issue(user.id)
    _set_auth_cookie(response, access_token, settings)

    return AuthResponse(access_token=access_token, user=user)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    response: Response,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Login with email and password."""
    user = store.verify_credentials(credentials.email, credentials.password)

    access_token = codec.issue(user.id)
    _set_auth_cookie(response, access_token, settings)

    return AuthResponse(access_token=access_token, user=user)


@router.get("/me", response_model=Principal)
def get_me(
    current_user: Annotated[Principal, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.post("/logout")
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Logout (client should discard token).

    Tokens are stateless, so nothing is revoked server-side; the cookie is
    cleared for browser clients.
    """
    response.delete_cookie(settings.auth_cookie_name)
    return {"message": "Logged out successfully"}
