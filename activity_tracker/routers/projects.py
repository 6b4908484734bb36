from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from activity_tracker.db import get_db
from activity_tracker.schemas import ProjectCreate, ProjectUpdate, ProjectOut
from activity_tracker.services import projects

router = APIRouter(prefix="/api", tags=["projects"])

@router.post("/createProject", response_model=ProjectOut)
def create_project(payload: ProjectCreate, db: Session = Depends(get_db)):
    return projects.create_project(db, payload)

@router.get("/getProjects", response_model=list[ProjectOut])
def get_projects(db: Session = Depends(get_db)):
    return projects.get_projects(db)

@router.post("/updateProject", response_model=ProjectOut)
def update_project(payload: ProjectUpdate, db: Session = Depends(get_db)):
    return projects.update_project(db, payload)
