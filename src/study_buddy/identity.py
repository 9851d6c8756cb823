"""Account sign-up, sign-in and access-token resolution via Supabase Auth.

Signed-out use is fully supported: no token means an anonymous caller whose
history is the shared anonymous list.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from pydantic import BaseModel
from supabase import AsyncClient, AuthError

from study_buddy.config import Settings
from study_buddy.errors import AuthenticationError
from study_buddy.storage.client import create_supabase_client

logger = logging.getLogger(__name__)


class AuthSession(BaseModel):
    """Outcome of sign-up or sign-in."""

    user_id: str
    email: str | None = None
    access_token: str | None = None  # None until the email address is confirmed
    confirmation_required: bool = False


@asynccontextmanager
async def _auth_client(settings: Settings) -> AsyncIterator[AsyncClient]:
    """A dedicated client for one auth exchange, its HTTP session closed afterwards."""
    client = await create_supabase_client(settings)
    try:
        yield client
    finally:
        await client.auth.close()


def _to_session(response) -> AuthSession:
    if response.user is None:
        raise AuthenticationError("Identity provider returned no user")
    session = response.session
    return AuthSession(
        user_id=response.user.id,
        email=response.user.email,
        access_token=session.access_token if session else None,
        confirmation_required=session is None,
    )


async def sign_in(settings: Settings, email: str, password: str) -> AuthSession:
    """Sign in with email and password on a dedicated client.

    Raises:
        AuthenticationError: On rejected credentials.
    """
    async with _auth_client(settings) as client:
        try:
            response = await client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(str(exc)) from exc
    logger.info("User signed in: %s", response.user.id if response.user else None)
    return _to_session(response)


async def sign_up(settings: Settings, email: str, password: str) -> AuthSession:
    """Create an account, then sign in right away when no session was issued.

    If the project requires email confirmation the follow-up sign-in is
    rejected; the result then carries confirmation_required=True.

    Raises:
        AuthenticationError: If the account cannot be created.
    """
    async with _auth_client(settings) as client:
        try:
            response = await client.auth.sign_up({"email": email, "password": password})
        except AuthError as exc:
            raise AuthenticationError(str(exc)) from exc

        if response.session is None:
            try:
                response = await client.auth.sign_in_with_password(
                    {"email": email, "password": password}
                )
            except AuthError:
                logger.info(
                    "Sign-in after sign-up rejected; confirmation pending for %s", email
                )

    return _to_session(response)


async def resolve_user_id(client: AsyncClient, authorization: str | None) -> str | None:
    """Map an Authorization header to a user id.

    Returns None for a missing header (anonymous caller).

    Raises:
        AuthenticationError: For a malformed header or a token the provider rejects.
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Authorization header must be 'Bearer <token>'")

    try:
        response = await client.auth.get_user(token.strip())
    except AuthError as exc:
        raise AuthenticationError(str(exc)) from exc

    if response is None or response.user is None:
        raise AuthenticationError("Access token is not valid")
    return response.user.id
