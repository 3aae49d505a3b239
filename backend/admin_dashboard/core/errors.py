# admin_dashboard/core/errors.py
"""
Application exceptions that are not expressed as ``HTTPException`` in routers.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class StoreError(Exception):
    """
    Raised by the user store when the database rejects or fails an operation.
    The underlying message is echoed to the client with a 500.
    """

    code = "STORE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": {"code": exc.code, "message": exc.message}},
    )
