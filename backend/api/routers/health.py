"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: backend.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from backend.boundary.db import Database, get_database


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(database: Database = Depends(get_database)) -> HealthResponse:
    """Database health check."""
    if not await database.ping():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unreachable",
        )
    return HealthResponse(status="healthy", message="Database connection OK")
