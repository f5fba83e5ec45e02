"""
API route modules.

This package contains subrouters for:
- Auth: administrator login
- Structure: knowledge branches and specialties
- Teachers: teaching staff, guarantors and heads of commissions
- Curriculum: subjects, syllabi and teaching load

Routers are included from src.api.main (under the /api prefix).
"""
