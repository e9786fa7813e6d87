# decor_api/core/errors.py
"""
Domain errors for the catalog API.

Services raise these instead of HTTPException so the same code paths can be
exercised without a request. `main.py` registers a single handler that turns
any CatalogError into a small JSON payload:

    {"error": "<category>", "detail": "<message>"}
"""

from fastapi import status


class CatalogError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "ServerError"
    detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


# ----- Authentication -----


class Unauthenticated(CatalogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthenticated"
    detail = "Authentication required"


class InvalidToken(CatalogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "InvalidToken"
    detail = "Invalid or expired token"


class InvalidCredentials(CatalogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "InvalidCredentials"
    detail = "Invalid email or password"


# ----- Validation -----


class ValidationFailed(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "ValidationError"
    detail = "Invalid request"


class MissingCategory(ValidationFailed):
    detail = "category is required"


class TooManyFiles(ValidationFailed):
    detail = "Too many files uploaded"


class FileTooLarge(ValidationFailed):
    status_code = 413
    detail = "Uploaded file is too large"


# ----- Lookups -----


class NotFound(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "NotFound"
    detail = "Not found"


# ----- I/O -----
# The message is fixed: the underlying cause is logged, never returned.


class StorageWriteFailed(CatalogError):
    def __init__(self):
        super().__init__()


class PersistenceFailed(CatalogError):
    def __init__(self):
        super().__init__()
