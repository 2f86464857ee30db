"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AuthenticationError(AppError):
    """Raised when credentials or a session token are not accepted."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class InsufficientSharesError(AppError):
    """Raised when attempting to sell more shares than owned."""

    def __init__(self, ticker: str, requested: str, available: str):
        super().__init__(
            f"Insufficient shares of {ticker}: requested {requested}, available {available}",
            code="INSUFFICIENT_SHARES",
        )


class StoreError(AppError):
    """Raised when the backing data store rejects or fails an operation."""

    status_code = 503

    def __init__(self, operation: str, detail: str):
        super().__init__(f"Store operation failed ({operation}): {detail}", code="STORE_ERROR")
