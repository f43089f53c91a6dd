"""
Main entrypoint for the Team Tracker API.

This module assembles the FastAPI application: it sets up logging,
creates the people, project and task stores, registers the error
handlers and includes the versioned router.  ``create_app`` builds a
new application with its own empty (or seeded) stores, which is what
the tests rely on; the module‑level ``app`` is the instance served by
uvicorn, e.g.::

    uvicorn team_tracker_api.app.main:app --port 3000
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.people_service import PeopleService
from .services.project_service import ProjectService
from .services.task_service import TaskService


def create_app(seed: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    seed : Optional[bool]
        Whether the stores start with the demo records.  Defaults to
        ``settings.seed_data``.

    Returns
    -------
    FastAPI
        A configured application owning a fresh set of stores.
    """
    logger = setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.people = PeopleService()
    app.state.projects = ProjectService()
    app.state.tasks = TaskService()
    if seed is None:
        seed = settings.seed_data
    if seed:
        for store in (app.state.people, app.state.projects, app.state.tasks):
            store.reset()

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.debug(
        "Application created with %d people, %d projects, %d tasks",
        len(app.state.people),
        len(app.state.projects),
        len(app.state.tasks),
    )
    return app


app = create_app()
