"""
REST API routes — movie catalog and account listing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Response, status

from auth.dependencies import (
    Identity,
    get_account_store,
    get_catalog_store,
    movies_write_identity,
    require_identity,
)
from database.accounts import AccountStore
from database.catalog import CatalogStore
from utils.schemas import (
    MovieOut,
    MovieRequest,
    MoviesResponse,
    UserOut,
    UsersResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/movies", response_model=MoviesResponse, tags=["movies"])
async def list_movies(
    identity: Identity = Depends(require_identity),
    catalog: CatalogStore = Depends(get_catalog_store),
) -> Dict[str, Any]:
    movies = await catalog.list_all()
    return {"moviesData": [MovieOut.from_row(m) for m in movies]}


@router.post(
    "/movies",
    response_model=MovieOut,
    status_code=status.HTTP_201_CREATED,
    tags=["movies"],
)
async def create_movie(
    req: MovieRequest,
    identity: Optional[Identity] = Depends(movies_write_identity),
    catalog: CatalogStore = Depends(get_catalog_store),
) -> MovieOut:
    movie = await catalog.create(req.title, req.posterLink, req.watchLink)
    logger.info("New movie added: %s (%s)", movie.title, movie.movie_id)
    return MovieOut.from_row(movie)


@router.put("/movies/{movie_id}", response_model=MovieOut, tags=["movies"])
async def update_movie(
    movie_id: str,
    req: MovieRequest,
    identity: Identity = Depends(require_identity),
    catalog: CatalogStore = Depends(get_catalog_store),
) -> MovieOut:
    """Replace title, poster and watch link of a movie. 404 if it does not exist."""
    movie = await catalog.update(movie_id, req.title, req.posterLink, req.watchLink)
    logger.info("Movie updated: %s", movie_id)
    return MovieOut.from_row(movie)


@router.delete(
    "/movies/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["movies"],
)
async def delete_movie(
    movie_id: str,
    identity: Identity = Depends(require_identity),
    catalog: CatalogStore = Depends(get_catalog_store),
) -> Response:
    await catalog.delete(movie_id)
    logger.info("Movie deleted: %s", movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/users", response_model=UsersResponse, tags=["users"])
async def list_users(
    identity: Identity = Depends(require_identity),
    accounts: AccountStore = Depends(get_account_store),
) -> Dict[str, Any]:
    """Administrative listing of every account (no pagination)."""
    users = await accounts.list_all()
    return {"usersData": [UserOut.model_validate(u) for u in users]}
