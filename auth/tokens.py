"""
Bearer token issuance and verification.

Tokens are JWTs signed with ``config.jwt_secret`` using
``config.jwt_algorithm`` (HS256 by default).  Verification is stateless:
a token is accepted while its signature matches and ``exp`` is in the
future.  Revocation is not supported; tokens are short-lived instead.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import jwt

from config.settings import config

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "user"


@dataclass(frozen=True)
class TokenClaims:
    subject: str
    role: Optional[str]
    expires_at: int


class TokenService:
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        default_ttl_seconds: int = 86400,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._default_ttl = default_ttl_seconds

    def issue(
        self,
        subject: str,
        role: Optional[str] = DEFAULT_ROLE,
        ttl_seconds: Optional[int] = None,
    ) -> str:
        """Create a signed token for ``subject`` expiring ``ttl_seconds`` from now."""
        now = int(time.time())
        ttl = self._default_ttl if ttl_seconds is None else ttl_seconds
        payload = {"sub": str(subject), "iat": now, "exp": now + ttl}
        if role is not None:
            payload["role"] = role
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Optional[TokenClaims]:
        """
        Return the claims of a valid token, or ``None``.

        Bad signatures, garbage input, a foreign algorithm, missing claims
        and expiry all yield ``None``.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.PyJWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None
        except (TypeError, ValueError) as exc:
            logger.debug("Unreadable token: %s", exc)
            return None

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        role = payload.get("role")
        return TokenClaims(
            subject=subject,
            role=role if isinstance(role, str) else None,
            expires_at=int(payload["exp"]),
        )


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    """Process-wide token service built from settings."""
    return TokenService(
        secret=config.jwt_secret,
        algorithm=config.jwt_algorithm,
        default_ttl_seconds=config.jwt_expiry_seconds,
    )
