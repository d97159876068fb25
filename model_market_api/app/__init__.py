"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each record type (models, purchases) has its own schema
module, service class and router under ``api/endpoints``.
"""

from .main import app  # noqa: F401
