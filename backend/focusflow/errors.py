"""Application error taxonomy.

Every handler-level failure is a ``BaseAppException`` carrying a stable
machine code, a human message and the HTTP status the remote interface
answers with. Shape validation of request bodies is left to pydantic/FastAPI
(422) so callers can tell the two apart.
"""
from fastapi import status


class BaseAppException(Exception):
    def __init__(self, code: str, message: str, http_status: int):
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class NotFoundError(BaseAppException):
    """Target row is missing or belongs to someone else.

    The message is the same in both cases so another user's data never
    shows through.
    """

    def __init__(self, code: str, message: str):
        super().__init__(code, message, status.HTTP_404_NOT_FOUND)

    @classmethod
    def for_entity(cls, code: str, entity: str) -> "NotFoundError":
        return cls(code, f"{entity} not found")


class ConflictError(BaseAppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status.HTTP_409_CONFLICT)


class ValidationAppError(BaseAppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status.HTTP_400_BAD_REQUEST)


class InternalServerError(BaseAppException):
    def __init__(self, message: str = "unexpected error"):
        super().__init__("INTERNAL_ERROR", message, status.HTTP_500_INTERNAL_SERVER_ERROR)
