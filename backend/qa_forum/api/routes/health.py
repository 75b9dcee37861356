"""Health Probes — liveness (process up) and readiness (database reachable).

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process serves requests
    - GET /api/v1/health/ready answers 503 until init_db() ran and the database answers

Design Decisions:
    - db_manager read through the module at call time: the lifespan creates it
      after this module is imported
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from qa_forum.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "qa-forum-api"


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    forum_db = database.db_manager
    if forum_db is None or not await forum_db.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": "unavailable"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
