"""
This module defines the exceptions raised by the DeepL API client.

Every error the client classifies derives from `DeeplError`, so callers can
catch the whole family at once or react to a specific failure. Network level
problems (DNS failures, refused connections, timeouts) are not part of this
hierarchy; they surface as `requests` exceptions.
"""
from typing import Optional

class DeeplError(Exception):
    """Base class for all exceptions raised by the DeepL client."""
    pass

class DeeplAuthorizationError(DeeplError):
    """Raised when no API key was provided or the server rejected it.

    The server signals a rejected key with HTTP 401 or 403.
    """
    pass

class DeeplServerError(DeeplError):
    """Raised when the server answers with any other non-200 status.

    The message is either the vendor's error text, wrapped in a short
    explanation, or just the raw HTTP status code.

    Attributes:
        status_code (Optional[int]): The HTTP status code returned by the server.
    """
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class DeeplDeserializationError(DeeplError):
    """Raised when a successful response does not have the expected shape."""
    pass
