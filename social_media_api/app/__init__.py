"""
Application package initializer.

The project is organised into layers: ``core`` (settings, logging,
database and exceptions), ``schemas`` (pydantic models), ``repositories``
(storage collaborators), ``services`` (validation and business rules)
and ``api`` (versioned FastAPI routers).
"""

from .main import app  # noqa: F401
