"""Route handlers for the API."""

from folioflow.api.routes import health, resumes

__all__ = [
    "health",
    "resumes",
]
