"""
Catalog store — persistence for ``Movie`` rows.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Movie
from utils.errors import NotFound


class CatalogStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, title: str, poster_link: str, watch_link: str) -> Movie:
        movie = Movie(
            movie_id=str(uuid.uuid4()),
            title=title,
            poster_link=poster_link,
            watch_link=watch_link,
        )
        self._session.add(movie)
        await self._session.commit()
        return movie

    async def list_all(self) -> List[Movie]:
        result = await self._session.execute(select(Movie))
        return list(result.scalars().all())

    async def find_by_id(self, movie_id: str) -> Optional[Movie]:
        result = await self._session.execute(
            select(Movie).where(Movie.movie_id == movie_id)
        )
        return result.scalar_one_or_none()

    async def update(
        self,
        movie_id: str,
        title: str,
        poster_link: str,
        watch_link: str,
    ) -> Movie:
        """Replace all mutable fields of a movie. Raises ``NotFound``."""
        movie = await self.find_by_id(movie_id)
        if movie is None:
            raise NotFound(f"Movie {movie_id} not found")

        movie.title = title
        movie.poster_link = poster_link
        movie.watch_link = watch_link
        await self._session.commit()
        return movie

    async def delete(self, movie_id: str) -> None:
        movie = await self.find_by_id(movie_id)
        if movie is None:
            raise NotFound(f"Movie {movie_id} not found")

        await self._session.delete(movie)
        await self._session.commit()
