"""
Exception types raised by the Clockify MCP server.
"""

from typing import Optional


class ConfigurationError(Exception):
    """Raised when required configuration (e.g. the API key) is missing."""


class ClockifyApiError(Exception):
    """
    Raised when the Clockify API answers with a non-2xx status code.

    Attributes:
        status_code: HTTP status code returned by Clockify
        reason: HTTP reason phrase (e.g. "Unauthorized")
        body: Response body text, or None if it was empty or unreadable
    """

    def __init__(self, status_code: int, reason: str, body: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body

        message = f"Clockify API error: {status_code} {reason}"
        if body:
            message += f" - {body}"
        super().__init__(message)
