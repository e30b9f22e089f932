"""Error taxonomy shared by services, adapters and the HTTP layer."""


class AccountsError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
        super().__init__(self.message)


class ValidationError(AccountsError):
    """Missing or malformed input."""

    status_code = 400
    message = "Invalid request"


class AuthenticationError(AccountsError):
    """Bad credentials or a missing/invalid token."""

    status_code = 401
    message = "Invalid credentials"


class NotFoundError(AccountsError):
    """No matching catalog or profile row."""

    status_code = 404
    message = "Not found"


class ConflictError(AccountsError):
    """A unique constraint was violated."""

    status_code = 409
    message = "Resource already exists"


class InternalError(AccountsError):
    """Storage, connection or otherwise unexpected failure."""

    status_code = 500
    message = "Internal Server Error"
