"""Error types and user-facing error messages

Fetch failures degrade the session to an empty catalog, export failures are
reported per format. Neither ends the session.
"""

import json
from typing import Optional

import requests


class ToolkitError(Exception):
    """Base class for toolkit errors"""
    pass


class CatalogFetchError(ToolkitError):
    """Raised when the remote tool list cannot be retrieved or parsed"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class CatalogStateError(ToolkitError):
    """Raised when the write-once catalog is written a second time"""
    pass


class ExportError(ToolkitError):
    """Raised when an export cannot be serialized or saved"""

    def __init__(self, format_name: str, message: str):
        super().__init__(f"{format_name} export failed: {message}")
        self.format_name = format_name
        self.reason = message


def get_user_friendly_error_message(error: Exception) -> str:
    """
    Convert technical error messages to short user-facing explanations.

    Args:
        error: The exception that occurred

    Returns:
        User-friendly error message
    """
    # Unwrap our own errors to the underlying cause when there is one
    cause = error.__cause__ if isinstance(error, ToolkitError) and error.__cause__ else error

    if isinstance(cause, requests.exceptions.Timeout):
        return "Request timeout - catalog source took too long to respond"

    if isinstance(cause, requests.exceptions.ConnectionError):
        return "Network connection error"

    if isinstance(cause, requests.exceptions.HTTPError):
        status = cause.response.status_code if cause.response is not None else None
        if status == 404:
            return "Catalog source not found (404)"
        if status is not None:
            return f"Catalog source returned HTTP {status}"
        return "Catalog source returned an error response"

    if isinstance(cause, (json.JSONDecodeError, requests.exceptions.JSONDecodeError)):
        return "Catalog source returned invalid JSON"

    if isinstance(cause, PermissionError):
        return "Permission denied while writing file"

    if isinstance(cause, OSError):
        return f"File system error: {cause.strerror or cause}"

    if isinstance(error, ToolkitError):
        return str(error)

    # Default: show error type + first 80 chars of message
    return f"{type(error).__name__}: {str(error)[:80]}"
