"""
Application package initializer.

The API is split into layers: ``api`` (HTTP routes), ``services``
(pass-through service), ``repositories`` (SQLite record store),
``schemas`` (pydantic request/response models) and ``core``
(configuration, logging, database bootstrap).
"""

from .main import app  # noqa: F401
