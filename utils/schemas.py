"""
Pydantic request / response schemas for the HTTP API.
"""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)


class SigninRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    token: str


class UserOut(BaseModel):
    """Public view of an account — never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str


class UsersResponse(BaseModel):
    usersData: List[UserOut]


# ═══════════════════════════════════════════════════════════════════════════════
# Movies
# ═══════════════════════════════════════════════════════════════════════════════


class MovieRequest(BaseModel):
    """
    Body of ``POST /movies`` and ``PUT /movies/{id}``.

    Older clients send the watch URL as ``watchNowLink``; both names are
    accepted.
    """

    title: str = Field(..., min_length=1, max_length=255)
    posterLink: str
    watchLink: str = Field(
        ..., validation_alias=AliasChoices("watchLink", "watchNowLink")
    )


class MovieOut(BaseModel):
    movieID: str
    title: str
    posterLink: str
    watchLink: str

    @classmethod
    def from_row(cls, movie) -> "MovieOut":
        return cls(
            movieID=movie.movie_id,
            title=movie.title,
            posterLink=movie.poster_link,
            watchLink=movie.watch_link,
        )


class MoviesResponse(BaseModel):
    moviesData: List[MovieOut]
