"""
Core application utilities.

This package provides:
- Application-level settings (separate from DB settings)
- Error types shared by repositories, services and the API
- Logging configuration, password hashing and JWT helpers
- FastAPI dependency helpers (session, unit of work, current admin)
"""
