"""Control API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import IApplication


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_control_router(app: IApplication) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.get("/health", response_model=StatusResponse)
    async def health() -> dict:
        """Liveness check."""
        return {"status": "ok"}

    @router.post("/reset", response_model=StatusResponse)
    async def reset_system() -> dict:
        """Clear in-memory data between test runs."""
        try:
            await app.reset()
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
