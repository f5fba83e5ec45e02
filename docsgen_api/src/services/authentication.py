from __future__ import annotations

import logging

from src.core.exceptions import AuthenticationError
from src.core.security import create_access_token, verify_password
from src.core.settings import AppSettings, get_app_settings

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"


class AuthenticationService:
    """
    Issues access tokens for the single administrator account.

    The administrator password is never stored; only its bcrypt hash is read
    from ADMIN_PASSWORD_HASH.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self.settings = settings or get_app_settings()

    # PUBLIC_INTERFACE
    def login(self, password: str) -> str:
        """
        Verify the administrator password and return a signed access token.

        Raises:
            AuthenticationError: the password does not match.
        """
        self.settings.require("ADMIN_PASSWORD_HASH")
        if not verify_password(password, self.settings.ADMIN_PASSWORD_HASH):
            logger.warning("Rejected administrator login")
            raise AuthenticationError("Invalid credentials")
        return create_access_token(subject=ADMIN_SUBJECT)
