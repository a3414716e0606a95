"""
FastAPI dependencies for authentication.

Provides ``db_session``, the store factories and the bearer-token
dependencies used across all protected routes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.tokens import TokenService, get_token_service
from config.settings import config
from database.accounts import AccountStore
from database.catalog import CatalogStore
from database.session import get_db_session
from utils.errors import Unauthorized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, attached to ``request.state.identity``."""

    subject: str
    role: Optional[str]


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_account_store(session: AsyncSession = Depends(db_session)) -> AccountStore:
    return AccountStore(session)


def get_catalog_store(session: AsyncSession = Depends(db_session)) -> CatalogStore:
    return CatalogStore(session)


def _parse_bearer(authorization: Optional[str]) -> str:
    if not authorization:
        raise Unauthorized("Missing Authorization header")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise Unauthorized("Malformed Authorization header")
    return parts[1]


async def require_identity(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    tokens: TokenService = Depends(get_token_service),
    accounts: AccountStore = Depends(get_account_store),
) -> Identity:
    """
    Extract and verify the Bearer token, returning the caller's identity.

    With ``verify_token_subject`` enabled the account behind the token
    must still exist.
    """
    token = _parse_bearer(authorization)

    claims = tokens.verify(token)
    if claims is None:
        raise Unauthorized("Invalid or expired token")

    if config.verify_token_subject:
        if await accounts.find_by_id(claims.subject) is None:
            logger.info("Token subject %s no longer exists", claims.subject)
            raise Unauthorized("Invalid or expired token")

    identity = Identity(subject=claims.subject, role=claims.role)
    request.state.identity = identity
    return identity


async def movies_write_identity(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    tokens: TokenService = Depends(get_token_service),
    accounts: AccountStore = Depends(get_account_store),
) -> Optional[Identity]:
    """``require_identity`` when ``movies_write_requires_auth`` is set, else open."""
    if not config.movies_write_requires_auth:
        return None
    return await require_identity(request, authorization, tokens, accounts)
