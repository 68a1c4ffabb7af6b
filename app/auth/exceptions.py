class AuthError(Exception):
    """Raised when the auth provider rejects or cannot complete a request."""
