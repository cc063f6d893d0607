"""
Session authentication middleware.

Resolves the bearer token in the Authorization header to a user by
looking its session up in the store.
"""

from typing import Optional
from fastapi import Depends, Request

from modules.auth.exceptions import MissingTokenError
from modules.auth.models import AuthContext
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Return the second whitespace-delimited part of an Authorization header.

    ``"Bearer abc"`` gives ``"abc"``; a missing header or a header with a
    single part gives None.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


async def authenticate_request(request: Request) -> AuthContext:
    """
    Authenticate a request and attach the result to ``request.state``.

    Raises:
        MissingTokenError: If no token is present (401)
        InvalidSessionError: If the token does not resolve (403)
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    if token is None:
        raise MissingTokenError()

    context = await get_auth_service(request).authenticate(token)
    request.state.user = context.user
    request.state.session = context.session
    return context


async def get_auth_context(request: Request) -> AuthContext:
    """
    Dependency that requires authentication and yields user and session.

    Usage:
        @router.post("/logout")
        async def logout(context: AuthContext = Depends(get_auth_context)):
            ...
    """
    return await authenticate_request(request)


async def get_current_user(
    context: AuthContext = Depends(get_auth_context),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return context.user
