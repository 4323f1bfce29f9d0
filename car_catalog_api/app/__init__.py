"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database, JWT helpers),
``schemas`` (Pydantic models), ``services`` (car storage and the LINE
token exchange) and ``api`` (route definitions).
"""

from .main import app  # noqa: F401
