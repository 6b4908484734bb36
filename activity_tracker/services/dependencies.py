import logging

from sqlalchemy.orm import Session

from activity_tracker.errors import InvalidArgumentError
from activity_tracker.models import Activity, ActivityDependency
from activity_tracker.schemas import DependencyCreate
from activity_tracker.services.common import get_or_404, store_operation, utcnow

logger = logging.getLogger(__name__)

@store_operation
def create_activity_dependency(db: Session, payload: DependencyCreate) -> ActivityDependency:
    """Record that ``activity_id`` depends on ``depends_on_activity_id``.

    Only direct self-dependencies are rejected; longer cycles are stored as given.
    """
    if payload.activity_id == payload.depends_on_activity_id:
        raise InvalidArgumentError("Activity cannot depend on itself")
    get_or_404(db, Activity, payload.activity_id)
    get_or_404(db, Activity, payload.depends_on_activity_id)

    dependency = ActivityDependency(
        activity_id=payload.activity_id,
        depends_on_activity_id=payload.depends_on_activity_id,
        created_at=utcnow(),
    )
    db.add(dependency); db.commit(); db.refresh(dependency)
    logger.info(
        "Activity %s now depends on activity %s",
        dependency.activity_id, dependency.depends_on_activity_id,
    )
    return dependency

@store_operation
def get_activity_dependencies(db: Session, activity_id: int) -> list[ActivityDependency]:
    return (
        db.query(ActivityDependency)
        .filter(ActivityDependency.activity_id == activity_id)
        .order_by(ActivityDependency.id)
        .all()
    )
