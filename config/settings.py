"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str                                      # HMAC key for bearer tokens (required)
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = 86400                      # 24 hours
    bcrypt_rounds: int = 10

    # ── Access policy ────────────────────────────────────────────────────
    movies_write_requires_auth: bool = True   # POST /movies needs a bearer token
    verify_token_subject: bool = False        # re-check the account behind every token

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str                                    # e.g. postgresql+asyncpg://… (required)
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_recycle: int = 3600
    create_tables_on_startup: bool = True

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]
    request_timeout_seconds: float = 30.0

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


config = Settings()
