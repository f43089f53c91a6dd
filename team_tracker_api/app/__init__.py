"""
Application package initializer.

The API is organised into small layers: ``core`` (settings, logging,
errors and dependencies), ``schemas`` (request and response models),
``services`` (the in‑memory stores) and ``api`` (versioned routers).
Each domain (people, projects, tasks) exposes a router defined in
``api/v1/endpoints`` backed by its own store.
"""

from .main import app  # noqa: F401
