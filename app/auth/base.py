from abc import ABC, abstractmethod
from collections.abc import Callable

from app.auth.models import AuthUser

SessionCallback = Callable[[AuthUser | None], None]
Unsubscribe = Callable[[], None]


class AuthProvider(ABC):
    """Contract for the hosted authentication backend."""

    @abstractmethod
    def get_current_user(self) -> AuthUser | None:
        """Return the signed-in user, or None when there is no session.

        Raises:
            AuthError: if the provider cannot be reached.
        """

    @abstractmethod
    def sign_in(self, email: str, password: str) -> AuthUser:
        """Start a session with email and password.

        Raises:
            AuthError: on rejected credentials or provider failure.
        """

    @abstractmethod
    def sign_out(self) -> None:
        """End the current session."""

    @abstractmethod
    def on_auth_state_change(self, callback: SessionCallback) -> Unsubscribe:
        """Call callback with the session user on every sign-in/sign-out.

        Returns a callable that cancels the subscription.
        """
