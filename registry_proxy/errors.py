"""
Exceptions raised along the request pipeline.

Every error carries the HTTP status and the public message that ends up in
the failure envelope. ``detail`` holds the internal reason and is only shown
to callers when the app runs in development mode.

Usage:
    from registry_proxy.errors import ValidationError

    raise ValidationError("Missing required parameter: q (query) is required")
"""

from typing import Any, Optional


class RegistryProxyError(Exception):
    """Base exception for all proxy errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class ValidationError(RegistryProxyError):
    """A required caller parameter is missing or empty."""

    status_code = 400
    default_message = "Invalid request"


class ConfigurationError(RegistryProxyError):
    """The server is missing a setting it needs to call upstream."""

    default_message = "API token not configured. Please set OPEN_CORPORATES_KEY in .env file"


class UpstreamApiError(RegistryProxyError):
    """Upstream answered with a non-2xx status; its status and body are forwarded."""

    default_message = "Error from API"

    def __init__(self, status_code: int, body: Any = None, message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamConnectionError(RegistryProxyError):
    """DNS, connection, TLS or timeout failure talking to upstream."""

    default_message = "Error connecting to API"


class UpstreamParseError(RegistryProxyError):
    """Upstream returned a success status with a body that is not JSON."""

    default_message = "Error processing API response"
