"""
Admin authentication interface.
Lets the console check credentials without knowing where they come from.
"""

from abc import ABC, abstractmethod


class Authenticator(ABC):
    """
    Interface for admin credential checks.

    Implementations:
    - SettingsAuthenticator: single admin account from ADMIN_USERNAME/ADMIN_PASSWORD
    """

    @abstractmethod
    def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair.

        Returns:
            True if the credentials are valid
        """
        pass
