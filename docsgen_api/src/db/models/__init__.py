"""
ORM models for the university domain: knowledge branches, specialties,
teachers with their guarantor and commission roles, subjects, syllabi
and teaching load.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .structure import (  # noqa: F401
    KnowledgeBranch,
    Specialty,
)
from .staff import (  # noqa: F401
    Guarantor,
    HeadOfSmc,
    Teacher,
)
from .curriculum import (  # noqa: F401
    Subject,
    Syllabus,
    TeacherLoad,
)
