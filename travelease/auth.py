"""
Bearer token guard for the protected routes.

Tokens are Firebase ID tokens issued to the web client.  The guard only
needs an email-bearing identity out of them, so verification sits behind
a small verifier object kept on ``app.state``; the rest of the service
never talks to Firebase directly.
"""

import logging
from typing import Any, Optional

import firebase_admin
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth, credentials, exceptions
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from travelease.config import Settings
from travelease.errors import create_error_response

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "travelease"


class Identity(BaseModel):
    uid: Optional[str] = None
    email: Optional[str] = None


class InvalidCredential(Exception):
    """Raised by a verifier when a token cannot be turned into an identity."""


class FirebaseIdentityVerifier:
    def __init__(self, app: firebase_admin.App):
        self.app = app

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirebaseIdentityVerifier":
        cert = credentials.Certificate(settings.firebase_credentials())
        return cls(firebase_admin.initialize_app(cert, name=FIREBASE_APP_NAME))

    async def verify(self, token: str) -> Identity:
        # verify_id_token may fetch signing certificates over the network
        try:
            claims = await run_in_threadpool(auth.verify_id_token, token, app=self.app)
        except (ValueError, exceptions.FirebaseError) as e:
            raise InvalidCredential(str(e)) from e
        return Identity(uid=claims.get("uid"), email=claims.get("email"))

    def close(self):
        firebase_admin.delete_app(self.app)


class UnconfiguredIdentityVerifier:
    """Stand-in used when no service account is configured; every token is refused."""

    async def verify(self, token: str) -> Identity:
        raise InvalidCredential("identity provider is not configured")

    def close(self):
        pass


def create_identity_verifier(settings: Settings):
    if settings.firebase_configured:
        logger.info("Firebase identity verification enabled for project %s", settings.FIREBASE_PROJECT_ID)
        return FirebaseIdentityVerifier.from_settings(settings)
    logger.warning("Firebase credentials missing; protected routes will answer 401")
    return UnconfiguredIdentityVerifier()


def get_identity_verifier(request: Request):
    return request.app.state.identity_verifier


bearer = HTTPBearer(auto_error=False)


def _unauthenticated(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=create_error_response(message=message),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    authorization: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    verifier=Depends(get_identity_verifier),
) -> Identity:
    """Resolve the bearer token to an identity or stop the request with 401.

    The reason a token was refused is logged but never returned to the caller.
    """
    if authorization is None or not authorization.credentials:
        raise _unauthenticated("Not authenticated")

    try:
        identity = await verifier.verify(authorization.credentials)
    except InvalidCredential as e:
        logger.debug("Rejected bearer token: %s", e)
        raise _unauthenticated("Invalid token")

    request.state.user = identity
    return identity


def ensure_owner(identity: Identity, email: Any) -> None:
    if identity.email is None or identity.email != email:
        logger.info("Denied %s access to records of %s", identity.email, email)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=create_error_response(
                message="Unauthorized access",
                details="The signed in user does not own this resource"
            )
        )
