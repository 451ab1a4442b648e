"""
Authentication service for the admin menu.
"""

import hmac
from typing import Optional

from ticket_booking.core.config import get_settings
from ticket_booking.core.exceptions import AuthenticationFailed
from ticket_booking.core.logging import get_logger
from ticket_booking.schemas.auth import LoginRequest
from ticket_booking.services.interfaces.authenticator import Authenticator

logger = get_logger(__name__)


class SettingsAuthenticator(Authenticator):
    """Single admin account taken from settings (or passed in explicitly)."""

    def __init__(self, username: Optional[str] = None, password: Optional[str] = None):
        settings = get_settings()
        self._username = username if username is not None else settings.ADMIN_USERNAME
        self._password = password if password is not None else settings.ADMIN_PASSWORD

    def authenticate(self, username: str, password: str) -> bool:
        # Compare both fields so timing does not reveal which one was wrong
        user_ok = hmac.compare_digest(username.encode(), self._username.encode())
        pass_ok = hmac.compare_digest(password.encode(), self._password.encode())
        return user_ok and pass_ok


def login(authenticator: Authenticator, login_data: LoginRequest) -> str:
    """
    Check admin credentials.
    Raises AuthenticationFailed if they are invalid; returns the username otherwise.
    """
    if not authenticator.authenticate(login_data.username, login_data.password.get_secret_value()):
        logger.warning("login_failed", username=login_data.username)
        raise AuthenticationFailed("Invalid credentials.")

    logger.info("admin_logged_in", username=login_data.username)
    return login_data.username
