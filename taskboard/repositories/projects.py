import random
from typing import List, Optional

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.orm import sessionmaker

from taskboard.errors import NotFoundError, ValidationError
from taskboard.models.project import Project
from taskboard.repositories.base import Repository
from taskboard.schemas.project import ProjectOut

log = structlog.get_logger()

PALETTE = (
    "#2563eb",  # blue-600
    "#7c3aed",  # violet-600
    "#dc2626",  # red-600
    "#059669",  # green-600
    "#ea580c",  # orange-600
    "#d97706",  # amber-600
    "#0ea5e9",  # sky-500
)


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("project name must not be empty")
    return name


class ProjectRepository(Repository):
    def __init__(self, session_factory: sessionmaker, rng: Optional[random.Random] = None):
        super().__init__(session_factory)
        # injectable so tests can pin the palette choice
        self._rng = rng or random.Random()

    def pick_color(self) -> str:
        return self._rng.choice(PALETTE)

    def list_projects(self) -> List[ProjectOut]:
        with self._transaction() as session:
            rows = session.scalars(select(Project).order_by(Project.created_at, Project.id))
            return [ProjectOut.model_validate(row) for row in rows]

    def create_project(self, name: str, color: str = "") -> ProjectOut:
        name = _clean_name(name)
        color = color or self.pick_color()
        with self._transaction() as session:
            project = Project(name=name, color=color)
            session.add(project)
            session.flush()
            session.refresh(project)
            created = ProjectOut.model_validate(project)
        log.info("project_created", project_id=created.id, name=created.name)
        return created

    def get_project(self, project_id: int) -> ProjectOut:
        with self._transaction() as session:
            project = session.get(Project, project_id)
            if project is None:
                raise NotFoundError("project not found")
            return ProjectOut.model_validate(project)

    def update_project(self, project_id: int, name: str, color: str = "") -> ProjectOut:
        """Rename and recolor. An empty color draws a fresh one from the palette."""
        name = _clean_name(name)
        color = color or self.pick_color()
        with self._transaction() as session:
            project = session.get(Project, project_id)
            if project is None:
                raise NotFoundError("project not found")
            project.name = name
            project.color = color
            project.updated_at = func.now()
            session.flush()
            session.refresh(project)
            return ProjectOut.model_validate(project)

    def delete_project(self, project_id: int) -> None:
        with self._transaction() as session:
            result = session.execute(delete(Project).where(Project.id == project_id))
            if result.rowcount == 0:
                raise NotFoundError("project not found")
        log.info("project_deleted", project_id=project_id)
