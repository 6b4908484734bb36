import functools
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from activity_tracker.errors import NotFoundError

logger = logging.getLogger(__name__)

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def store_operation(func):
    """Log store failures (including an unreachable database) and re-raise them."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError:
            logger.exception("%s failed", func.__name__)
            raise
    return wrapper

def get_or_404(db: Session, model, entity_id: int):
    row = db.query(model).filter(model.id == entity_id).first()
    if row is None:
        raise NotFoundError.for_entity(model.__name__, entity_id)
    return row
