from fastapi import APIRouter

from activity_tracker.schemas import HealthOut
from activity_tracker.services.common import utcnow

router = APIRouter(prefix="/api", tags=["health"])

@router.get("/healthcheck", response_model=HealthOut)
def healthcheck():
    return {"status": "ok", "timestamp": utcnow()}
