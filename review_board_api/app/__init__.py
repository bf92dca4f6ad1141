"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, file storage),
``schemas`` (pydantic models), ``services`` (the review collection)
and ``api`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
