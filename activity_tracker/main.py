import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from activity_tracker.config import settings
from activity_tracker.db import engine, init_db
from activity_tracker.errors import TrackerError
from activity_tracker.middleware import request_log_middleware
from activity_tracker.routers import health, users, projects, activities

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_db()
    except Exception as ex:
        logger.error("Could not create tables: %s", ex)
        raise
    logger.info("%s %s ready", settings.APP_TITLE, settings.APP_VERSION)
    yield
    engine.dispose()
    logger.info("Database connections closed")

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

# ---- middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
request_log_middleware(app)

# ---- domain errors -> HTTP
@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

# ---- routers
app.include_router(health.router)
app.include_router(users.router)
app.include_router(projects.router)
app.include_router(activities.router)

def run():
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT,
                log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
