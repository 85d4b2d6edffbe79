from .http_response import api_response, error_response
from .logger import get_logger
from .request_context import authenticated_user_id

__all__ = ["api_response", "error_response", "get_logger", "authenticated_user_id"]
