"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Core plumbing (settings, logging, storage of the backing
document, asset URL resolution and error types) lives in ``core``.
Category logic lives in ``services`` and the HTTP surface is defined
in ``api/v1/endpoints``, with request and response models in
``schemas``.
"""

from .main import app  # noqa: F401
