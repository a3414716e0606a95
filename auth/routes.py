"""
Auth API routes — signup, signin.

Route prefix: none (``/signup``, ``/signin``)
"""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from auth.dependencies import get_account_store
from auth.password import hash_password, verify_password
from auth.tokens import DEFAULT_ROLE, TokenService, get_token_service
from database.accounts import AccountStore
from utils.errors import DuplicateEmail, InvalidCredentials
from utils.schemas import SigninRequest, SignupRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=TokenResponse)
async def signup(
    req: SignupRequest,
    accounts: AccountStore = Depends(get_account_store),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, str]:
    """Register a new user and return a bearer token."""
    if await accounts.find_by_email(req.email) is not None:
        logger.info("Signup rejected: email already in use")
        raise DuplicateEmail()

    password_hash = await run_in_threadpool(hash_password, req.password)
    user = await accounts.create(req.email, password_hash, req.name)

    token = tokens.issue(user.id, role=DEFAULT_ROLE)
    logger.info("Registered user %s", user.id)
    return {"token": token}


@router.post("/signin", response_model=TokenResponse)
async def signin(
    req: SigninRequest,
    accounts: AccountStore = Depends(get_account_store),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, str]:
    """Login with email + password."""
    user = await accounts.find_by_email(req.email)
    if user is None:
        logger.info("Signin rejected")
        raise InvalidCredentials()

    if not await run_in_threadpool(verify_password, req.password, user.password_hash):
        logger.info("Signin rejected")
        raise InvalidCredentials()

    token = tokens.issue(user.id, role=DEFAULT_ROLE)
    logger.info("Login: %s", user.id)
    return {"token": token}
