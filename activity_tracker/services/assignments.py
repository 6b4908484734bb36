import logging

from sqlalchemy.orm import Session

from activity_tracker.models import Activity, ActivityAssignment, User
from activity_tracker.schemas import AssignmentCreate
from activity_tracker.services.common import get_or_404, store_operation, utcnow

logger = logging.getLogger(__name__)

@store_operation
def assign_user_to_activity(db: Session, payload: AssignmentCreate) -> ActivityAssignment:
    get_or_404(db, User, payload.user_id)
    get_or_404(db, Activity, payload.activity_id)
    # repeated assignment of the same pair is stored again, not deduplicated
    assignment = ActivityAssignment(
        activity_id=payload.activity_id,
        user_id=payload.user_id,
        created_at=utcnow(),
    )
    db.add(assignment); db.commit(); db.refresh(assignment)
    logger.info("Assigned user %s to activity %s", assignment.user_id, assignment.activity_id)
    return assignment

@store_operation
def get_activity_assignments(db: Session, activity_id: int) -> list[ActivityAssignment]:
    return (
        db.query(ActivityAssignment)
        .filter(ActivityAssignment.activity_id == activity_id)
        .order_by(ActivityAssignment.id)
        .all()
    )
