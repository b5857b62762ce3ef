"""HTTP layer: transport, session refresh and the resilient client."""

from .client import ApiClient, has_session_cookie, is_excluded_endpoint
from .models import ApiResponse, FormField, RequestDescriptor
from .session_refresh import RefreshState, SessionRefresher
from .transport import Transport

__all__ = [
    "ApiClient",
    "ApiResponse",
    "FormField",
    "RefreshState",
    "RequestDescriptor",
    "SessionRefresher",
    "Transport",
    "has_session_cookie",
    "is_excluded_endpoint",
]
