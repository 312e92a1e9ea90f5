"""Authentication boundary used by the settings screen.

Only sign-out is needed here; identity management itself lives elsewhere.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class AuthenticationService(ABC):
    @property
    @abstractmethod
    def signed_in(self) -> bool: ...

    @property
    @abstractmethod
    def user(self) -> Optional[str]: ...

    @abstractmethod
    async def sign_out(self) -> None: ...


class SessionAuthenticationService(AuthenticationService):
    """Keeps the signed-in user for the lifetime of the process."""

    def __init__(self, user: Optional[str] = None):
        self._user = user

    @property
    def signed_in(self) -> bool:
        return self._user is not None

    @property
    def user(self) -> Optional[str]:
        return self._user

    def sign_in(self, user: str):
        self._user = user
        logger.info(f"User '{user}' signed in")

    async def sign_out(self) -> None:
        if self._user is None:
            return
        logger.info(f"User '{self._user}' signed out")
        self._user = None
