from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

NOT_FOUND_CODE = 44
INTERNAL_CODE = 50


class APIError(Exception):
    """Error raised by handlers and rendered as ``{"message", "error_code"}``."""

    def __init__(self, message: str, status_code: int, error_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code

    @classmethod
    def not_found(cls) -> "APIError":
        return cls("Not Found", status_code=404, error_code=NOT_FOUND_CODE)

    @classmethod
    def internal(cls, message: str) -> "APIError":
        # Datastore failures of every kind collapse into this one arm.
        return cls(message, status_code=500, error_code=INTERNAL_CODE)

    def to_dict(self):
        return {"message": self.message, "error_code": self.error_code}


async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
