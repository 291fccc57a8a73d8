"""
Top‑level package for the Quiz Content API.

This file makes ``quiz_content_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``quiz_content_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
