"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sweetshop.api.routing import PolicyRoute
from sweetshop.core.config import settings
from sweetshop.core.database import check_db_connected, get_db
from sweetshop.schemas.health import HealthResponse

router = APIRouter(route_class=PolicyRoute)


@router.get("", name="health", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """Return service status and whether the database answers a trivial query."""
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
    )
