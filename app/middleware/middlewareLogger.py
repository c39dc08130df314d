from fastapi import Request, Response
from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse

from app.exceptions.custom_exception import ContactError
from utils.logger import logger as log
from utils.timezones import timezone_utils


def error_body(e: Exception) -> dict:
    """Same ``{"error", "message"}`` shape the contact routes answer with."""
    if isinstance(e, ContactError):
        return {"error": type(e).__name__, "message": str(e)}
    return {"error": "InternalServerError", "message": "An unexpected error occurred"}


class LoggerMiddleware(BaseHTTPMiddleware):
    """Logs every contact API request with its status and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = timezone_utils.get_timezone_datetime()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            log.error(f"Unhandled {type(e).__name__} on {request.method} {request.url.path}: {e}")
            return JSONResponse(status_code=status_code, content={"detail": error_body(e)})
        finally:
            elapsed = timezone_utils.get_timezone_datetime() - start_time
            log.info(f'{request.method} {request.url.path} -> {status_code} completed in {elapsed}')
        return response
