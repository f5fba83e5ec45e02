"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

Schemas are grouped by domain module (structure, staff, curriculum) and also
include common reusable models such as standard responses.
"""

from .common import ErrorResponse, HealthResponse, IDModel  # noqa: F401
