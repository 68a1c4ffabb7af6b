from collections.abc import Callable

from app.auth.base import AuthProvider, Unsubscribe
from app.auth.exceptions import AuthError
from app.auth.models import AuthUser
from app.logging.logger import Log


class AuthService:
    """Admin-facing wrapper over an AuthProvider."""

    def __init__(self, provider: AuthProvider) -> None:
        self._provider = provider

    def sign_in_admin(self, email: str, password: str) -> AuthUser:
        try:
            user = self._provider.sign_in(email, password)
        except AuthError:
            raise
        except Exception as exc:
            raise AuthError("Authentication failed") from exc
        Log.info(f"Admin {user.id} signed in")
        return user

    def sign_out(self) -> None:
        try:
            self._provider.sign_out()
        except AuthError as exc:
            Log.error(f"Sign out error: {exc}")
            raise

    def get_user(self) -> AuthUser | None:
        try:
            return self._provider.get_current_user()
        except AuthError as exc:
            Log.error(f"Get user error: {exc}")
            return None

    def is_authenticated(self) -> bool:
        return self.get_user() is not None

    def on_auth_state_change(self, callback: Callable[[bool], None]) -> Unsubscribe:
        """Subscribe to session changes; callback receives whether a user is signed in."""
        return self._provider.on_auth_state_change(lambda user: callback(user is not None))
