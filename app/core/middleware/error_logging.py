from typing import Optional, Dict, Any
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.core.exceptions import AppError
from app.core.logging import console_logger


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id: Optional[str] = getattr(getattr(request, "state", None), "request_id", None)
        if not request_id:
            # Ensure we always have a request id, even if request logging is disabled
            request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
            request.state.request_id = request_id

        try:
            return await call_next(request)

        except AppError as exc:
            logger = console_logger.bind(
                request_id=request_id,
                method=request.method,
                path=str(request.url.path),
                status_code=exc.status_code,
                error_code=exc.error_code,
            )
            if exc.kind == "server":
                logger.error("app_error", detail=exc.message, details=exc.details, exc_info=True)
            else:
                logger.warning("app_error", detail=exc.message)

            payload: Dict[str, Any] = {**exc.to_dict(), "request_id": request_id}
            headers = {"X-Request-ID": request_id}
            if exc.kind == "auth":
                headers["WWW-Authenticate"] = "Bearer"
            return JSONResponse(status_code=exc.status_code, content=payload, headers=headers)

        except Exception:
            logger = console_logger.bind(
                request_id=request_id,
                method=request.method,
                path=str(request.url.path),
            )
            logger.error("unhandled_exception", exc_info=True)

            payload = {"detail": "Internal Server Error", "error_code": "INTERNAL_ERROR", "request_id": request_id}
            return JSONResponse(status_code=500, content=payload, headers={"X-Request-ID": request_id})
