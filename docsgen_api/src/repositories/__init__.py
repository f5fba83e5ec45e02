"""
Repository layer for data access.

``Repository`` wraps the SQLAlchemy session for a single entity type and
``UnitOfWork`` groups repositories over one session with an explicit commit.
"""

from .base import Repository  # noqa: F401
from .unit_of_work import UnitOfWork  # noqa: F401
