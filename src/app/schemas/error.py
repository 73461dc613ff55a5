"""Error response schema.

All error responses built by the exception handlers in main.py use the
same flat body: {"error": "<message>"}.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body with a human-readable message."""

    error: str
