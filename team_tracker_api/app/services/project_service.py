"""Service for the projects collection."""

from __future__ import annotations

import logging
from typing import List, Optional

from team_tracker_api.app.schemas.project import Project, ProjectCreate, ProjectUpdate
from team_tracker_api.app.services.store import RecordStore

logger = logging.getLogger(__name__)


def _seed_projects() -> List[Project]:
    return [Project(id=1, name="Plataforma Educativa", description="Sistema de cursos online")]


class ProjectService(RecordStore[Project]):
    """In‑memory store of :class:`Project` records; only ``name`` is mutable."""

    entity = "project"
    seed = staticmethod(_seed_projects)

    def list_projects(self) -> List[Project]:
        return self.all()

    def get_project(self, project_id: int) -> Optional[Project]:
        return self._find(project_id)

    def create_project(self, data: ProjectCreate) -> Project:
        return self._insert(
            lambda new_id: Project(id=new_id, name=data.name, description=data.description)
        )

    def update_project(self, project_id: int, data: ProjectUpdate) -> Optional[Project]:
        with self._lock:
            project = self._find(project_id)
            if project is None:
                return None
            if data.name:
                project.name = data.name
                logger.info("Renamed project %s", project_id)
            return project

    def delete_project(self, project_id: int) -> bool:
        return self._remove(project_id)
