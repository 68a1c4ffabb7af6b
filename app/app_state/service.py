from app.app_state.models import AppState
from app.auth.base import AuthProvider
from app.auth.exceptions import AuthError
from app.auth.models import AuthUser
from app.database.exceptions import StoreError
from app.database.repositories.app_state_repository import AppStateRepository
from app.logging.logger import Log


class AppStateService:
    """Load, save and clear the signed-in user's wizard state."""

    def __init__(self, auth_provider: AuthProvider, repository: AppStateRepository) -> None:
        self._auth_provider = auth_provider
        self._repository = repository

    def load_app_state(self) -> AppState | None:
        """Return the saved state, or None if signed out, unsaved or unreadable."""
        user = self._current_user()
        if user is None:
            return None
        try:
            return self._repository.find_by_user(user.id)
        except StoreError as exc:
            Log.error(f"Error loading app state: {exc}")
            return None

    def save_app_state(self, state: AppState) -> None:
        """Upsert the state for the current user.

        Raises:
            StoreError: if the record store fails.
        """
        user = self._current_user()
        if user is None:
            Log.error("No authenticated user, app state not saved")
            return

        existing_id = self._repository.find_id_by_user(user.id)
        if existing_id is not None:
            self._repository.update(existing_id, state)
        else:
            self._repository.insert(user.id, state)
        Log.debug(f"Saved app state for user {user.id} at step {state.current_step}")

    def clear_app_state(self) -> None:
        user = self._current_user()
        if user is None:
            return
        self._repository.delete_by_user(user.id)
        Log.info(f"Cleared app state for user {user.id}")

    def _current_user(self) -> AuthUser | None:
        try:
            return self._auth_provider.get_current_user()
        except AuthError as exc:
            Log.warning(f"Could not resolve current user: {exc}")
            return None
