"""Shared FastAPI dependencies: settings, bearer auth and policy checks."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Header, Request

from gamestore.core.config import Settings
from gamestore.core.policy import Action, enforce
from gamestore.core.security import verify_bearer
from gamestore.schemas.auth import TokenClaims


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_current_claims(
    settings: Annotated[Settings, Depends(get_app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Dependency: require a valid Bearer JWT and return its claims. Raises 401 otherwise."""
    return verify_bearer(authorization, settings)


def require(action: Action) -> Callable[..., TokenClaims]:
    """Dependency factory: authenticate, then check `action` against the authorization policy."""

    def dependency(
        claims: Annotated[TokenClaims, Depends(get_current_claims)],
        settings: Annotated[Settings, Depends(get_app_settings)],
    ) -> TokenClaims:
        enforce(claims, action, settings.ADMIN_ONLY_CATALOG_WRITES)
        return claims

    return dependency
