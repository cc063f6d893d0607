"""
Authentication API endpoints.

Login issues a session token; logout deactivates sessions.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_auth_service
from api.middleware.auth import get_auth_context

from .interfaces import IAuthService
from .models import (
    AuthContext,
    ClientInfo,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    request: Request,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Exchange email and password for a bearer token.

    The token is valid for seven days or until logout.
    """
    client = ClientInfo(
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    result = await service.login(body.email, body.password, body.device_id, client)
    return LoginResponse(token=result.token, user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    context: AuthContext = Depends(get_auth_context),
    service: IAuthService = Depends(get_auth_service),
) -> LogoutResponse:
    """Deactivate the session that made this request."""
    await service.logout(context.session)
    return LogoutResponse(revoked=1)


@router.post("/logout/all", response_model=LogoutResponse)
async def logout_all(
    context: AuthContext = Depends(get_auth_context),
    service: IAuthService = Depends(get_auth_service),
) -> LogoutResponse:
    """Deactivate every session of the current user, on all devices."""
    revoked = await service.revoke_all_sessions(context.user.id)
    return LogoutResponse(revoked=revoked)
