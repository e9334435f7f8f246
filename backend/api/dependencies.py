"""Shared dependencies for API routes."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from models.schemas import Identity
from services.errors import Forbidden, NotAuthenticated
from services.identity import IdentityProvider
from services.record_store import RecordStore

_bearer = HTTPBearer(auto_error=False)


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_identity_provider(request: Request) -> IdentityProvider:
    return request.app.state.identity_provider


def get_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str:
    if credentials is None or not credentials.credentials:
        raise NotAuthenticated()
    return credentials.credentials


def get_current_identity(
    token: str = Depends(get_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    identity = identity_provider.get_current_identity(token)
    if identity is None:
        raise NotAuthenticated("Session expired or invalid. Please sign in again.")
    return identity


def require_role(*roles: str):
    """Dependency factory: the caller must hold one of ``roles``."""

    def _check(identity: Identity = Depends(get_current_identity)) -> Identity:
        if identity.role not in roles:
            raise Forbidden()
        return identity

    return _check
