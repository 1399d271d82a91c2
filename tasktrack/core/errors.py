"""Error taxonomy shared by the services and the HTTP layer.

Each error carries the HTTP status it maps to and the JSON key its message is
returned under (``message`` for most endpoints, ``error`` for list endpoints).
"""


class AppError(Exception):
    status_code = 500
    key = "message"

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.message = message
        if key is not None:
            self.key = key

    def to_dict(self) -> dict:
        return {self.key: self.message}


class ValidationError(AppError):
    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class MissingCredential(AuthenticationError):
    def __init__(self):
        super().__init__("missing token")


class InvalidCredential(AuthenticationError):
    def __init__(self):
        super().__init__("invalid token")


class UnknownSubject(AuthenticationError):
    # same message as InvalidCredential, callers must not learn which case it was
    def __init__(self):
        super().__init__("invalid token")


class AuthorizationError(AppError):
    status_code = 403
    key = "error"

    def __init__(self, message: str = "Access denied", key: str | None = None):
        super().__init__(message, key)


class NotFoundError(AppError):
    status_code = 404


class StorageError(AppError):
    status_code = 500

    def __init__(self, message: str = "server error"):
        super().__init__(message)
