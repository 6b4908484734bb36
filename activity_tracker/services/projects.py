import logging

from sqlalchemy.orm import Session

from activity_tracker.models import Project
from activity_tracker.schemas import ProjectCreate, ProjectUpdate
from activity_tracker.services.common import get_or_404, store_operation, utcnow

logger = logging.getLogger(__name__)

@store_operation
def create_project(db: Session, payload: ProjectCreate) -> Project:
    now = utcnow()
    project = Project(
        name=payload.name,
        description=payload.description,
        created_at=now,
        updated_at=now,
    )
    db.add(project); db.commit(); db.refresh(project)
    logger.info("Created project %s", project.id)
    return project

@store_operation
def get_projects(db: Session) -> list[Project]:
    return db.query(Project).order_by(Project.id).all()

@store_operation
def update_project(db: Session, payload: ProjectUpdate) -> Project:
    project = get_or_404(db, Project, payload.id)
    changes = payload.model_dump(exclude_unset=True, exclude={"id"})
    for field, value in changes.items():
        setattr(project, field, value)
    project.updated_at = utcnow()
    db.commit(); db.refresh(project)
    logger.info("Updated project %s (%s)", project.id, ", ".join(changes) or "touch")
    return project
