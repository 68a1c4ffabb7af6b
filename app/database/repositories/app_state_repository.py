from datetime import datetime, timezone
from typing import Any

from app.app_state.models import AppState
from app.database.base import RecordStore, Row


def _state_fields(state: AppState) -> dict[str, Any]:
    return {
        "current_step": state.current_step,
        "form_data": state.form_data,
        "selected_documents": list(state.selected_documents),
        "dark_mode": state.dark_mode,
    }


class AppStateRepository:
    """Operations on the app_state table, one row per user."""

    def __init__(self, store: RecordStore, table: str = "app_state") -> None:
        self._store = store
        self._table = table

    def find_by_user(self, user_id: str) -> AppState | None:
        row = self._store.select_one(self._table, {"user_id": user_id})
        if row is None:
            return None
        return AppState(
            current_step=row["current_step"],
            form_data=row.get("form_data") or {},
            selected_documents=list(row.get("selected_documents") or []),
            dark_mode=bool(row.get("dark_mode", False)),
        )

    def find_id_by_user(self, user_id: str) -> str | None:
        row: Row | None = self._store.select_one(self._table, {"user_id": user_id}, columns=("id",))
        if row is None:
            return None
        return str(row["id"])

    def insert(self, user_id: str, state: AppState) -> None:
        self._store.insert(self._table, {"user_id": user_id, **_state_fields(state)})

    def update(self, row_id: str, state: AppState) -> None:
        fields = _state_fields(state)
        fields["updated_at"] = datetime.now(timezone.utc)
        self._store.update(self._table, row_id, fields)

    def delete_by_user(self, user_id: str) -> int:
        return self._store.delete_where(self._table, {"user_id": user_id})
