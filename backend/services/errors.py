"""Error taxonomy shared by services and mapped to HTTP responses in main.py."""


class CareerCompassError(Exception):
    """Base error. ``message`` is safe to show to the end user."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CareerCompassError):
    """Bad input shape or constraint, reported against a single field."""

    status_code = 422

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class AuthError(CareerCompassError):
    status_code = 401


class InvalidCredentials(AuthError):
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class AlreadyRegistered(AuthError):
    status_code = 409

    def __init__(self, message: str = "An account with this email already exists"):
        super().__init__(message)


class NotAuthenticated(AuthError):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class Forbidden(AuthError):
    status_code = 403

    def __init__(self, message: str = "You do not have access to this resource"):
        super().__init__(message)


class StoreError(CareerCompassError):
    """Any failure reported by the record store."""

    status_code = 502


class RecordNotFound(StoreError):
    status_code = 404
