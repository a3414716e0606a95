"""
SQLAlchemy ORM models for the ``User`` and ``Movie`` tables.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import DeclarativeBase


def _new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "User"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column("passwordHash", String(255), nullable=False)
    name = Column(String(255), nullable=False)


class Movie(Base):
    __tablename__ = "Movie"

    movie_id = Column("movieID", String(36), primary_key=True, default=_new_id)
    title = Column(String(255), nullable=False)
    poster_link = Column("posterLink", Text, nullable=False)
    watch_link = Column("watchLink", Text, nullable=False)
