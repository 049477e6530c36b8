# gamepass_relay/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn gamepass_relay:app --reload
"""

__version__ = "0.1.0"

from .main import app  # noqa: E402

__all__ = ["app", "__version__"]
