"""
testrail-mcp exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class GatewayError(Exception):
    """Base class — anything not classified below is reported as 'unknown'."""

    error_type = "unknown"


class ValidationError(GatewayError):
    """Arguments failed schema constraints before any network call."""

    error_type = "validation"

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class SetupError(GatewayError):
    """TestRail URL or credentials are not configured."""

    error_type = "setup"


class ApiError(GatewayError):
    """Normalized upstream failure: network error, timeout, or non-2xx status."""

    error_type = "transport"

    def __init__(self, message, status=None, body=None):
        super().__init__(message)
        self.status = status
        self.body = body


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors that callers want to handle."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
