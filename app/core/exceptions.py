"""
Application error types.

The HTTP-facing errors subclass FastAPI's HTTPException so services can raise
them directly and routers need no translation layer. ``SlugTakenError`` is
internal: the CRUD layer raises it and union creation recovers from it.
"""
from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "You are not an admin of this union"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ValidationError(HTTPException):
    """A required field was blank once whitespace was stripped."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class SlugTakenError(Exception):
    """Insert rejected by the unique constraint on ``unions.slug``."""

    def __init__(self, slug: str):
        super().__init__(f"Slug already taken: {slug}")
        self.slug = slug
