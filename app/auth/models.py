from dataclasses import dataclass


@dataclass(frozen=True)
class AuthUser:
    """The signed-in account as reported by the auth provider."""

    id: str
    email: str | None = None
