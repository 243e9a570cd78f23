from fastapi import HTTPException


class AuthServiceError(Exception):
    """Base class for failures raised by the store and token collaborators."""


class StorageError(AuthServiceError):
    pass


class TokenError(AuthServiceError):
    pass


class InvalidTokenException(HTTPException):
    def __init__(self, detail: str = "Invalid token"):
        super().__init__(status_code=401, detail=detail)
