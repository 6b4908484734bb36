import logging

from sqlalchemy.orm import Session

from activity_tracker.errors import InvalidArgumentError
from activity_tracker.models import User
from activity_tracker.schemas import UserCreate
from activity_tracker.services.common import store_operation, utcnow

logger = logging.getLogger(__name__)

@store_operation
def create_user(db: Session, payload: UserCreate) -> User:
    exists = db.query(User).filter(User.email == payload.email).first()
    if exists:
        raise InvalidArgumentError(f"User with email {payload.email} already exists")
    user = User(name=payload.name, email=payload.email, created_at=utcnow())
    db.add(user); db.commit(); db.refresh(user)
    logger.info("Created user %s", user.id)
    return user

@store_operation
def get_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()
