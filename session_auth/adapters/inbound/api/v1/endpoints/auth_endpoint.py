# session_auth/adapters/inbound/api/v1/endpoints/auth_endpoint.py (async version)

import logging
from fastapi import APIRouter, Depends, Request, Response, status

from session_auth.adapters.inbound.api.cookies import SessionCookie
from session_auth.adapters.inbound.api.deps import (
    get_auth_service,
    get_current_admin,
    get_current_user,
    get_revocation_ledger,
    get_session_cookie,
)
from session_auth.application.dtos.user_dto import (
    AdminUserRegister,
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserOutput,
    UserRegister,
)
from session_auth.application.use_cases.auth_use_cases import AsyncAuthService
from session_auth.application.use_cases.session_use_cases import RevocationLedger
from session_auth.domain.models.user_domain_model import User

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_EXAMPLE = {"detail": "Invalid Credentials", "code": "INVALID_CREDENTIALS"}


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register User - Creates a new user and logs them in",
    description="""
    Creates a new user with role `user` and delivers a session token in an
    HTTP-only cookie.

    Field rules:
    - firstName: 3 to 20 characters
    - emailId: valid and unique email
    - password: at least 8 characters, with upper and lower case letters,
      a number and a symbol
    """,
    responses={
        400: {"description": "Invalid registration data"},
        409: {"description": "Email already in use"},
    },
)
async def register_user(
        user_input: UserRegister,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
        cookie: SessionCookie = Depends(get_session_cookie),
):
    session = await service.register_user(user_input)
    cookie.set(response, session.token)
    logger.info(f"User registered: {session.user.id}")
    return AuthResponse(user=session.user, message="Registered & logged in successfully")


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login User - Opens a session",
    description=(
            "Authenticates a user (email/password) and delivers a session token in an "
            "HTTP-only cookie. The error is identical for unknown emails and wrong passwords."
    ),
    responses={401: {"description": "Invalid credentials", "content": {"application/json": {"example": ERROR_EXAMPLE}}}},
)
async def login_user(
        user_input: UserLogin,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
        cookie: SessionCookie = Depends(get_session_cookie),
):
    session = await service.login_user(user_input)
    cookie.set(response, session.token)
    return AuthResponse(user=session.user, message="Logged in successfully")


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout - Revokes the current session token",
    description=(
            "Blocks the session token until its natural expiry and clears the cookie. "
            "Logging out without a session succeeds. If the session store is unavailable "
            "the response is 503 and the cookie is left untouched."
    ),
    responses={503: {"description": "Session store unavailable, retry later"}},
)
async def logout_user(
        request: Request,
        response: Response,
        ledger: RevocationLedger = Depends(get_revocation_ledger),
        cookie: SessionCookie = Depends(get_session_cookie),
):
    await ledger.revoke(cookie.read(request))
    cookie.clear(response)
    return MessageResponse(message="Logged out successfully")


@router.post(
    "/admin/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Admin Register - Creates a user with an explicit role",
    description="Admin-only. Creates a user with the requested role and opens a session for it.",
    responses={403: {"description": "Caller is not an admin"}},
)
async def admin_register_user(
        user_input: AdminUserRegister,
        response: Response,
        _: User = Depends(get_current_admin),
        service: AsyncAuthService = Depends(get_auth_service),
        cookie: SessionCookie = Depends(get_session_cookie),
):
    session = await service.register_admin(user_input)
    cookie.set(response, session.token)
    logger.info(f"User {session.user.id} registered by an admin with role {session.user.role.value}")
    return AuthResponse(user=session.user, message="User Registered Successfully")


@router.delete(
    "/profile",
    response_model=MessageResponse,
    summary="Delete Profile - Deletes the authenticated user",
)
async def delete_profile(
        current_user: User = Depends(get_current_user),
        service: AsyncAuthService = Depends(get_auth_service),
):
    await service.delete_profile(current_user.id)
    return MessageResponse(message="Deleted Successfully")


@router.get(
    "/check",
    response_model=AuthResponse,
    summary="Check Session - Returns the authenticated user",
)
async def check_session(current_user: User = Depends(get_current_user)):
    return AuthResponse(user=UserOutput.from_domain(current_user), message="Valid session")
