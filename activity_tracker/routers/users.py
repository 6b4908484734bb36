from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from activity_tracker.db import get_db
from activity_tracker.schemas import UserCreate, UserOut
from activity_tracker.services import users

router = APIRouter(prefix="/api", tags=["users"])

@router.post("/createUser", response_model=UserOut)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return users.create_user(db, payload)

@router.get("/getUsers", response_model=list[UserOut])
def get_users(db: Session = Depends(get_db)):
    return users.get_users(db)
