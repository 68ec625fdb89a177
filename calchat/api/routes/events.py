"""Calendar event API routes."""

from dataclasses import asdict
from typing import Literal

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...events import EVENT_CATEGORIES, get_event_category, get_recurring_dates
from ...exceptions import InvalidRecurrenceRuleError
from ...models import RecurrenceRule


class EventCategoryResponse(BaseModel):
    """Response model for event category."""

    value: str
    label: str
    color: str


class RecurrenceRequest(BaseModel):
    """Request model for expanding a recurring event."""

    start_date: str
    frequency: Literal["daily", "weekly", "monthly", "yearly"]
    interval: int = 1
    count: int | None = None
    until: str | None = None


class RecurrenceResponse(BaseModel):
    """Response model for recurrence dates."""

    dates: list[str]


def create_events_router() -> APIRouter:
    """Create events router."""
    router = APIRouter(prefix="/api", tags=["events"])

    @router.get("/event-categories", response_model=list[EventCategoryResponse])
    async def list_event_categories() -> list[dict]:
        """List event categories in display order."""
        return [asdict(c) for c in EVENT_CATEGORIES]

    @router.get("/event-categories/{value}", response_model=EventCategoryResponse)
    async def event_category(value: str) -> dict:
        """Get a single event category."""
        category = get_event_category(value)
        if category is None:
            raise HTTPException(status_code=404, detail=f"Unknown category: {value}")
        return asdict(category)

    @router.post("/recurrence", response_model=RecurrenceResponse)
    async def recurrence(request: RecurrenceRequest) -> dict:
        """Expand a recurrence rule into dates."""
        rule = RecurrenceRule(
            frequency=request.frequency,
            interval=request.interval,
            count=request.count,
            until=request.until,
        )
        try:
            return {"dates": get_recurring_dates(request.start_date, rule)}
        except InvalidRecurrenceRuleError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
