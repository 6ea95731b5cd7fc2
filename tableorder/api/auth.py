"""Admin authentication gate."""
import base64
import logging
import secrets
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Depends, Request

from tableorder.core.config import Settings
from tableorder.core.dependencies import get_settings_from_app
from tableorder.core.errors import InvalidCredentials, Unauthenticated

logger = logging.getLogger(__name__)


class Authenticator(ABC):
    """Abstract base class for admin authenticators."""

    @abstractmethod
    def authenticate(self, authorization: Optional[str]) -> str:
        """
        Validate an ``Authorization`` header value.

        Returns:
            The authenticated admin identity.

        Raises:
            Unauthenticated: header missing or malformed.
            InvalidCredentials: header well-formed but credentials wrong.
        """
        pass


def parse_basic_credentials(authorization: Optional[str]) -> tuple[str, str]:
    """Decode a ``Basic <base64(user:pass)>`` header value."""
    if not authorization:
        raise Unauthenticated()

    scheme, _, encoded = authorization.partition(" ")
    if scheme.lower() != "basic" or not encoded.strip():
        raise Unauthenticated()

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except ValueError:
        # binascii.Error, UnicodeDecodeError and non-ASCII input
        raise Unauthenticated()

    username, separator, password = decoded.partition(":")
    if not separator:
        raise Unauthenticated()
    return username, password


class BasicAuthenticator(Authenticator):
    """Checks HTTP Basic credentials against one configured admin pair."""

    def __init__(self, username: str, password: str):
        self._username = username.encode("utf-8")
        self._password = password.encode("utf-8")

    @classmethod
    def from_settings(cls, settings: Settings) -> "BasicAuthenticator":
        return cls(settings.admin_user, settings.admin_pass)

    def authenticate(self, authorization: Optional[str]) -> str:
        username, password = parse_basic_credentials(authorization)
        user_ok = secrets.compare_digest(username.encode("utf-8"), self._username)
        pass_ok = secrets.compare_digest(password.encode("utf-8"), self._password)
        if not (user_ok and pass_ok):
            raise InvalidCredentials()
        return username


def get_authenticator(request: Request) -> Authenticator:
    """Get the authenticator attached to the application."""
    return request.app.state.authenticator


async def require_admin(
    request: Request,
    authenticator: Authenticator = Depends(get_authenticator),
) -> str:
    """Dependency to require admin credentials."""
    try:
        return authenticator.authenticate(request.headers.get("Authorization"))
    except (Unauthenticated, InvalidCredentials) as e:
        logger.warning(
            f"[AUTH] Rejected {request.method} {request.url.path} - {e.message} - "
            f"Client: {request.client.host if request.client else 'unknown'}"
        )
        raise


async def authorize_order_listing(
    request: Request,
    authenticator: Authenticator = Depends(get_authenticator),
    settings: Settings = Depends(get_settings_from_app),
) -> None:
    """Apply the configured access policy for listing orders."""
    if settings.orders_require_admin:
        await require_admin(request, authenticator)
