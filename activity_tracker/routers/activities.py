from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from activity_tracker.db import get_db
from activity_tracker.schemas import (
    ActivityCreate, ActivityUpdate, ActivityStatusUpdate, ActivityOut,
    AssignmentCreate, AssignmentOut, DependencyCreate, DependencyOut,
)
from activity_tracker.services import activities, assignments, dependencies

router = APIRouter(prefix="/api", tags=["activities"])

@router.post("/createActivity", response_model=ActivityOut)
def create_activity(payload: ActivityCreate, db: Session = Depends(get_db)):
    return activities.create_activity(db, payload)

@router.get("/getProjectActivities", response_model=list[ActivityOut])
def get_project_activities(project_id: int, db: Session = Depends(get_db)):
    return activities.get_project_activities(db, project_id)

@router.post("/updateActivity", response_model=ActivityOut)
def update_activity(payload: ActivityUpdate, db: Session = Depends(get_db)):
    return activities.update_activity(db, payload)

@router.post("/updateActivityStatus", response_model=ActivityOut)
def update_activity_status(payload: ActivityStatusUpdate, db: Session = Depends(get_db)):
    return activities.update_activity_status(db, payload)

# ---- assignments
@router.post("/assignUserToActivity", response_model=AssignmentOut, tags=["assignments"])
def assign_user_to_activity(payload: AssignmentCreate, db: Session = Depends(get_db)):
    return assignments.assign_user_to_activity(db, payload)

@router.get("/getActivityAssignments", response_model=list[AssignmentOut], tags=["assignments"])
def get_activity_assignments(
    activity_id: int = Query(alias="activityId"), db: Session = Depends(get_db)
):
    return assignments.get_activity_assignments(db, activity_id)

# ---- dependencies
@router.post("/createActivityDependency", response_model=DependencyOut, tags=["dependencies"])
def create_activity_dependency(payload: DependencyCreate, db: Session = Depends(get_db)):
    return dependencies.create_activity_dependency(db, payload)

@router.get("/getActivityDependencies", response_model=list[DependencyOut], tags=["dependencies"])
def get_activity_dependencies(
    activity_id: int = Query(alias="activityId"), db: Session = Depends(get_db)
):
    return dependencies.get_activity_dependencies(db, activity_id)
