"""
Application package.

The application is organised the usual way for a FastAPI service:
``core`` holds configuration, logging, errors and middleware,
``schemas`` the pydantic models, ``services`` the business logic and
``api`` the versioned routers.
"""

from .main import app, create_app  # noqa: F401
