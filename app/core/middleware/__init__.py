from .error_logging import ErrorHandlingMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = ["ErrorHandlingMiddleware", "RequestLoggingMiddleware"]