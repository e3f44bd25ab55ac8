"""
AuthError - Raised when credentials cannot be verified.
Maps to: HTTP 401 Unauthorized
"""


class AuthError(Exception):
    def __init__(self, message: str = "Authentication failed."):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Same error for unknown user and wrong password, so usernames cannot be probed."""

    def __init__(self, message: str = "Invalid username or password."):
        super().__init__(message)
