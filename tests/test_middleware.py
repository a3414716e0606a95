"""
Tests for the error mapping layer and the request deadline.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

import database.session as db
from api.middleware import RequestDeadlineMiddleware
from auth.dependencies import get_account_store, get_catalog_store
from config.settings import config
from main import app


class _BrokenCatalog:
    async def list_all(self):
        raise OperationalError("SELECT", {}, Exception("connection refused"))


class _SlowCatalog:
    async def list_all(self):
        await asyncio.sleep(1)
        return []


class _Exploding:
    async def list_all(self):
        raise RuntimeError("boom")


class _TimingOut:
    async def list_all(self):
        raise TimeoutError("upstream lookup timed out")


class _SessionContext:
    def __init__(self, session):
        self._session = session

    async def __aenter__(self):
        return self._session

    async def __aexit__(self, *exc):
        return False


class TestErrorMapping:
    def test_storage_error_is_generic_500(self, client, auth_headers):
        app.dependency_overrides[get_catalog_store] = lambda: _BrokenCatalog()
        res = client.get("/movies", headers=auth_headers)
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}
        assert "connection refused" not in res.text

    def test_unexpected_error_is_generic_500(self, auth_headers):
        app.dependency_overrides[get_catalog_store] = lambda: _Exploding()
        client = TestClient(app, raise_server_exceptions=False)
        res = client.get("/movies", headers=auth_headers)
        assert res.status_code == 500
        assert "boom" not in res.text


class TestDeadline:
    def test_slow_request_times_out(self, client, auth_headers, monkeypatch):
        monkeypatch.setattr(config, "request_timeout_seconds", 0.05)
        app.dependency_overrides[get_catalog_store] = lambda: _SlowCatalog()
        res = client.get("/movies", headers=auth_headers)
        assert res.status_code == 504
        assert res.json() == {"detail": "Request timed out"}


class TestCorsOnErrors:
    def test_unexpected_error_keeps_cors_headers(self, client, auth_headers):
        app.dependency_overrides[get_catalog_store] = lambda: _Exploding()
        res = client.get(
            "/movies", headers={**auth_headers, "Origin": "http://frontend.test"}
        )
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}
        assert res.headers["access-control-allow-origin"] == "*"

    def test_storage_error_keeps_cors_headers(self, client, auth_headers):
        app.dependency_overrides[get_catalog_store] = lambda: _BrokenCatalog()
        res = client.get(
            "/movies", headers={**auth_headers, "Origin": "http://frontend.test"}
        )
        assert res.status_code == 500
        assert "access-control-allow-origin" in res.headers


class TestCommitFailure:
    @pytest.fixture
    def failing_session(self, monkeypatch):
        session = MagicMock()
        session.execute = AsyncMock(
            return_value=MagicMock(scalar_one_or_none=MagicMock(return_value=None))
        )
        session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("could not serialize"))
        )
        session.rollback = AsyncMock()
        session.close = AsyncMock()
        monkeypatch.setattr(db, "async_session_factory", lambda: _SessionContext(session))
        return session

    def test_failed_movie_commit_is_500(self, client, auth_headers, failing_session):
        app.dependency_overrides.pop(get_catalog_store)
        res = client.post(
            "/movies",
            json={"title": "M", "posterLink": "p", "watchLink": "w"},
            headers=auth_headers,
        )
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}
        failing_session.commit.assert_awaited_once()
        failing_session.rollback.assert_awaited()
        failing_session.close.assert_awaited()

    def test_failed_signup_commit_is_500(self, client, failing_session):
        app.dependency_overrides.pop(get_account_store)
        res = client.post(
            "/signup",
            json={"name": "Ann", "email": "ann@x.com", "password": "longpass1"},
        )
        assert res.status_code == 500
        assert "token" not in res.json()
        failing_session.rollback.assert_awaited()


class TestDeadlineScope:
    def test_timeout_raised_by_handler_is_500(self, client, auth_headers):
        app.dependency_overrides[get_catalog_store] = lambda: _TimingOut()
        res = client.get("/movies", headers=auth_headers)
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}

    @pytest.mark.asyncio
    async def test_inner_timeout_is_not_reported_as_deadline(self):
        async def inner(scope, receive, send):
            raise TimeoutError("inner")

        sent = []

        async def send(message):
            sent.append(message)

        middleware = RequestDeadlineMiddleware(inner)
        with pytest.raises(TimeoutError, match="inner"):
            await middleware({"type": "http", "method": "GET", "path": "/"}, None, send)
        assert sent == []
