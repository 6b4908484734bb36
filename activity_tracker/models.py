import enum
from datetime import timezone

from sqlalchemy import CheckConstraint, Column, Integer, String, DateTime, Text, ForeignKey, Enum
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import relationship

from activity_tracker.db import Base

def _as_utc(value):
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

class UtcDateTime(TypeDecorator):
    """Stored as UTC, read back as an aware UTC datetime on every backend.

    SQLite keeps no offset, so values are converted before binding; naive
    input is taken to be UTC already.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return _as_utc(value)

    def process_result_value(self, value, dialect):
        return _as_utc(value)

class ActivityStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"

class User(Base):
    __tablename__ = "users"
    id         = Column(Integer, primary_key=True, index=True)
    name       = Column(Text, nullable=False)
    email      = Column(String(255), unique=True, index=True, nullable=False)
    created_at = Column(UtcDateTime(), nullable=False)

    assignments = relationship("ActivityAssignment", back_populates="user")

class Project(Base):
    __tablename__ = "projects"
    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    created_at  = Column(UtcDateTime(), nullable=False)
    updated_at  = Column(UtcDateTime(), nullable=False)

    activities  = relationship("Activity", back_populates="project")

class Activity(Base):
    __tablename__ = "activities"
    id          = Column(Integer, primary_key=True, index=True)
    project_id  = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    name        = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    start_date  = Column(UtcDateTime(), nullable=False)
    end_date    = Column(UtcDateTime(), nullable=False)
    status      = Column(
        Enum(ActivityStatus, name="activity_status",
             values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ActivityStatus.TODO,
    )
    created_at  = Column(UtcDateTime(), nullable=False)
    updated_at  = Column(UtcDateTime(), nullable=False)

    project      = relationship("Project", back_populates="activities")
    assignments  = relationship("ActivityAssignment", back_populates="activity")
    dependencies = relationship(
        "ActivityDependency",
        foreign_keys="ActivityDependency.activity_id",
        back_populates="activity",
    )
    dependents   = relationship(
        "ActivityDependency",
        foreign_keys="ActivityDependency.depends_on_activity_id",
        back_populates="depends_on_activity",
    )

class ActivityAssignment(Base):
    # no unique (activity_id, user_id): repeated assignments are kept as separate rows
    __tablename__ = "activity_assignments"
    id          = Column(Integer, primary_key=True, index=True)
    activity_id = Column(Integer, ForeignKey("activities.id"), nullable=False, index=True)
    user_id     = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at  = Column(UtcDateTime(), nullable=False)

    activity    = relationship("Activity", back_populates="assignments")
    user        = relationship("User", back_populates="assignments")

class ActivityDependency(Base):
    __tablename__ = "activity_dependencies"
    __table_args__ = (
        CheckConstraint("activity_id != depends_on_activity_id", name="no_self_dependency"),
    )
    id                     = Column(Integer, primary_key=True, index=True)
    activity_id            = Column(Integer, ForeignKey("activities.id"), nullable=False, index=True)
    depends_on_activity_id = Column(Integer, ForeignKey("activities.id"), nullable=False)
    created_at             = Column(UtcDateTime(), nullable=False)

    activity            = relationship(
        "Activity", foreign_keys=[activity_id], back_populates="dependencies"
    )
    depends_on_activity = relationship(
        "Activity", foreign_keys=[depends_on_activity_id], back_populates="dependents"
    )
