"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from snippet_vault.config import Settings, get_settings
from snippet_vault.database import get_db
from snippet_vault.schemas.auth import Principal
from snippet_vault.services.credentials import CredentialStore, PasswordHasher
from snippet_vault.services.gate import AuthGate
from snippet_vault.services.screenshot_storage import ScreenshotStorage
from snippet_vault.services.snippet_service import SnippetService
from snippet_vault.services.tokens import TokenCodec

# Missing credentials are resolved by the gate, not rejected here
security = HTTPBearer(auto_error=False)


def get_password_hasher(settings: Annotated[Settings, Depends(get_settings)]) -> PasswordHasher:
    """Get password hasher configured with the bcrypt cost."""
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_codec(settings: Annotated[Settings, Depends(get_settings)]) -> TokenCodec:
    """Get token codec bound to the signing secret."""
    return TokenCodec(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        default_ttl=settings.token_ttl,
    )


def get_credential_store(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> CredentialStore:
    """Get credential store with dependencies."""
    return CredentialStore(db, hasher)


def get_auth_gate(
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> AuthGate:
    """Get authorization gate with dependencies."""
    return AuthGate(codec, store)


def get_request_token(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> str | None:
    """Read the session token from the Bearer header, then the auth cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.auth_cookie_name)


def get_optional_user(
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
    token: Annotated[str | None, Depends(get_request_token)],
) -> Principal | None:
    """Resolve the caller, or None when anonymous."""
    return gate.authenticate(token)


def get_current_user(
    user: Annotated[Principal | None, Depends(get_optional_user)],
) -> Principal:
    """Get the current authenticated user or refuse the request."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_screenshot_storage(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ScreenshotStorage:
    """Get screenshot storage for the configured upload directory."""
    return ScreenshotStorage(settings.upload_dir, settings.max_upload_bytes)


def get_snippet_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[ScreenshotStorage, Depends(get_screenshot_storage)],
) -> SnippetService:
    """Get snippet service with dependencies."""
    return SnippetService(db, storage)
