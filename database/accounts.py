"""
Account store — persistence for ``User`` rows.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User
from utils.errors import DuplicateEmail

logger = logging.getLogger(__name__)


class AccountStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, email: str, password_hash: str, name: str) -> User:
        """
        Insert a new account.

        The lookup gives a clean error for the common case; the unique
        constraint on ``email`` catches concurrent signups that both
        passed it.
        """
        if await self.find_by_email(email) is not None:
            raise DuplicateEmail()

        user = User(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=password_hash,
            name=name,
        )
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Unique constraint rejected signup for %s", email)
            raise DuplicateEmail() from exc
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[User]:
        result = await self._session.execute(select(User))
        return list(result.scalars().all())
