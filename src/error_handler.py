"""Error types and response mapping for the review proxy."""
from typing import Any, Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class ReviewProxyError(Exception):
    status_code = 500

    def __init__(self, message: str, *, detail: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class BadRequestError(ReviewProxyError):
    status_code = 400


class NotFoundError(ReviewProxyError):
    status_code = 404


class UpstreamError(ReviewProxyError):
    status_code = 500


class InternalError(ReviewProxyError):
    status_code = 500


class ErrorHandler:
    def to_response(self, exc: Exception, fallback_message: str = "Internal server error") -> Tuple[int, Dict[str, Any]]:
        """Map an exception to (status_code, {"error": message})."""
        if isinstance(exc, ReviewProxyError):
            if exc.status_code >= 500:
                logger.error("%s: %s %s", type(exc).__name__, exc.message, exc.detail or "", exc_info=exc)
            return exc.status_code, {"error": exc.message}

        logger.error("Unhandled exception in review proxy: %s", exc, exc_info=exc)
        return InternalError.status_code, {"error": fallback_message}
