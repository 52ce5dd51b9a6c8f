"""Response formatting helpers"""

from .response_formatter import (
    error_body,
    json_response,
    error_response,
    not_found_response,
    no_content_response,
)

__all__ = [
    "error_body",
    "json_response",
    "error_response",
    "not_found_response",
    "no_content_response",
]
