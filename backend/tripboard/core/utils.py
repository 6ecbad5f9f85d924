"""
Utility functions for the application.
"""
from typing import Any, Dict


def format_error(message: str, code: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message, "code": code}
    if details:
        response["details"] = details
    return response
