from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, StrictInt, StringConstraints, field_validator

from activity_tracker.models import ActivityStatus

NameStr = Annotated[str, StringConstraints(min_length=1)]

# ---- users
class UserCreate(BaseModel):
    name: NameStr
    email: EmailStr

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    email: EmailStr
    created_at: datetime

# ---- projects
class ProjectCreate(BaseModel):
    name: NameStr
    description: str | None

class ProjectUpdate(BaseModel):
    """Partial update: omitted fields are kept, ``description=None`` clears it."""
    id: StrictInt
    name: NameStr | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v):
        if v is None:
            raise ValueError("name may be omitted but not null")
        return v

class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

# ---- activities
class ActivityCreate(BaseModel):
    project_id: StrictInt
    name: NameStr
    description: str | None
    start_date: datetime
    end_date: datetime
    status: ActivityStatus = ActivityStatus.TODO

class ActivityUpdate(BaseModel):
    """Partial update of an activity; only ``description`` is nullable."""
    id: StrictInt
    name: NameStr | None = None
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: ActivityStatus | None = None

    @field_validator("name", "start_date", "end_date", "status")
    @classmethod
    def _not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} may be omitted but not null")
        return v

class ActivityStatusUpdate(BaseModel):
    id: StrictInt
    status: ActivityStatus

class ActivityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    project_id: int
    name: str
    description: str | None
    start_date: datetime
    end_date: datetime
    status: ActivityStatus
    created_at: datetime
    updated_at: datetime

# ---- assignments
class AssignmentCreate(BaseModel):
    activity_id: StrictInt
    user_id: StrictInt

class AssignmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    activity_id: int
    user_id: int
    created_at: datetime

# ---- dependencies
class DependencyCreate(BaseModel):
    activity_id: StrictInt
    depends_on_activity_id: StrictInt

class DependencyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    activity_id: int
    depends_on_activity_id: int
    created_at: datetime

# ---- health
class HealthOut(BaseModel):
    status: str
    timestamp: datetime
