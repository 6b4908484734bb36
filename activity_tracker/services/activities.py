"""Activity handlers.

Creation checks that the owning project exists; listing by project does
not, an unknown project id simply has no activities.
"""
import logging

from sqlalchemy.orm import Session

from activity_tracker.models import Activity, Project
from activity_tracker.schemas import ActivityCreate, ActivityStatusUpdate, ActivityUpdate
from activity_tracker.services.common import get_or_404, store_operation, utcnow

logger = logging.getLogger(__name__)

@store_operation
def create_activity(db: Session, payload: ActivityCreate) -> Activity:
    get_or_404(db, Project, payload.project_id)
    now = utcnow()
    activity = Activity(
        project_id=payload.project_id,
        name=payload.name,
        description=payload.description,
        start_date=payload.start_date,
        end_date=payload.end_date,
        status=payload.status,
        created_at=now,
        updated_at=now,
    )
    db.add(activity); db.commit(); db.refresh(activity)
    logger.info("Created activity %s in project %s", activity.id, activity.project_id)
    return activity

@store_operation
def get_project_activities(db: Session, project_id: int) -> list[Activity]:
    return (
        db.query(Activity)
        .filter(Activity.project_id == project_id)
        .order_by(Activity.id)
        .all()
    )

@store_operation
def update_activity(db: Session, payload: ActivityUpdate) -> Activity:
    activity = get_or_404(db, Activity, payload.id)
    changes = payload.model_dump(exclude_unset=True, exclude={"id"})
    for field, value in changes.items():
        setattr(activity, field, value)
    activity.updated_at = utcnow()
    db.commit(); db.refresh(activity)
    logger.info("Updated activity %s (%s)", activity.id, ", ".join(changes) or "touch")
    return activity

@store_operation
def update_activity_status(db: Session, payload: ActivityStatusUpdate) -> Activity:
    # any status may follow any other, including itself
    activity = get_or_404(db, Activity, payload.id)
    activity.status = payload.status
    activity.updated_at = utcnow()
    db.commit(); db.refresh(activity)
    logger.info("Activity %s moved to %s", activity.id, activity.status.value)
    return activity
