"""
Top‑level package for the Model Market API.

This file makes ``model_market_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``model_market_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
