"""
Top‑level router for version 1 of the API.

This router aggregates the three collection routers under their
resource prefixes.  Each collection is independent of the others.
"""

from fastapi import APIRouter

from .endpoints import people, projects, tasks

# Resource prefixes, relative to the version prefix set in main.py.
RESOURCE_PREFIXES = ("/people", "/projects", "/tasks")

router = APIRouter()

router.include_router(people.router, prefix="/people", tags=["people"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
