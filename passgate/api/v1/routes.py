"""
API v1 routes.

Defines REST endpoints for account registration and login. Credentials
are only read from JSON request bodies.

The core runs on the worker thread pool so bcrypt never blocks the
event loop.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from passgate.api.dependencies import get_account_service
from passgate.api.models import (
    ErrorResponse,
    InvalidFieldDetail,
    InvalidFieldResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
)
from passgate.domain.accounts import AccountService
from passgate.domain.ports import AuthResult, LoginInput, RegisterOutcome, RegistrationInput

router = APIRouter(tags=["v1"])


@router.post(
    "/register",
    response_model=MessageResponse,
    responses={
        400: {"model": InvalidFieldResponse, "description": "Invalid user data"},
        409: {"model": ErrorResponse, "description": "User already exists"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    summary="Register a new account",
    description="Submit username, email, role and password to create an account.",
)
async def register(
    request_data: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    """
    Register a new account.

    - **username**: 3-24 characters, unique
    - **email**: Valid email address, unique
    - **role**: 'user' or 'admin'
    - **password**: 5-24 characters, upper and lower case, one special character
    """
    result = await run_in_threadpool(
        service.register,
        RegistrationInput(
            username=request_data.username,
            email=request_data.email,
            role=request_data.role,
            password=request_data.password,
        ),
    )

    if result.outcome == RegisterOutcome.INVALID:
        detail = InvalidFieldDetail(
            message="Invalid user data",
            field=result.field or "",
            reason=result.reason or "",
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail.model_dump(),
        )

    if result.outcome == RegisterOutcome.CONFLICT:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User already exists",
        )

    return MessageResponse(message="Success")


@router.post(
    "/login",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid password"},
        401: {"model": ErrorResponse, "description": "User does not exist"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    summary="Log in with username and password",
    description="Verify the submitted credentials against the stored account.",
)
async def login(
    request_data: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    """
    Verify login credentials.

    Unknown usernames and wrong passwords are reported with different
    status codes (401 and 400).
    """
    result = await run_in_threadpool(
        service.authenticate,
        LoginInput(username=request_data.username, password=request_data.password),
    )

    if result == AuthResult.USER_NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User does not exist",
        )

    if result == AuthResult.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid Password",
        )

    return MessageResponse(message="Welcome!")
