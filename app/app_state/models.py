from dataclasses import dataclass, field
from typing import Any


@dataclass
class AppState:
    """Per-user wizard state kept between sessions."""

    current_step: int = 0
    form_data: dict[str, Any] = field(default_factory=dict)
    selected_documents: list[str] = field(default_factory=list)
    dark_mode: bool = False
    is_generating: bool = False  # transient, never persisted
