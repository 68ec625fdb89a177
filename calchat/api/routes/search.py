"""Search API routes."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException, Query

from ...app import IApplication
from ...search import search_items


class SearchRequest(BaseModel):
    """Request model for field search."""

    items: list[dict[str, Any]]
    query: str
    fields: list[str]


class SearchResponse(BaseModel):
    """Response model for field search."""

    items: list[dict[str, Any]]


class IndexRequest(BaseModel):
    """Records to (re)build the search index from."""

    events: list[dict[str, Any]] = Field(default_factory=list)
    messages: list[dict[str, Any]] | dict[str, list[dict[str, Any]]] = Field(default_factory=list)
    contacts: list[dict[str, Any]] = Field(default_factory=list)
    files: list[dict[str, Any]] = Field(default_factory=list)


class IndexResponse(BaseModel):
    """Response model for index build."""

    keys: int


class SearchHitResponse(BaseModel):
    """Response model for a ranked search hit."""

    type: str
    item: dict[str, Any]
    score: float


def create_search_router(app: IApplication) -> APIRouter:
    """Create search router."""
    router = APIRouter(prefix="/api/search", tags=["search"])

    @router.post("", response_model=SearchResponse)
    async def search(request: SearchRequest) -> dict:
        """Filter items whose fields contain the query."""
        return {"items": search_items(request.items, request.query, request.fields)}

    @router.post("/index", response_model=IndexResponse)
    async def build_index(request: IndexRequest) -> dict:
        """Replace the search index."""
        try:
            app.search_engine.build_index(
                events=request.events,
                messages=request.messages,
                contacts=request.contacts,
                files=request.files,
            )
            return {"keys": len(app.search_engine)}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/engine", response_model=list[SearchHitResponse])
    async def engine_search(
        q: str = Query(..., description="Free-text query"),
        types: list[str] | None = Query(None, description="Index buckets to keep"),
        categories: list[str] | None = Query(None, description="Categories to keep"),
        start: date | None = Query(None, description="Event date range start"),
        end: date | None = Query(None, description="Event date range end"),
    ) -> list[dict]:
        """Ranked search over the index."""
        if (start is None) != (end is None):
            raise HTTPException(status_code=400, detail="start and end go together")
        try:
            hits = app.search_engine.search(
                q,
                types=types,
                date_range=(start, end) if start and end else None,
                categories=categories,
            )
            return [{"type": h.type, "item": h.item, "score": h.score} for h in hits]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/suggestions", response_model=list[str])
    async def suggestions(q: str = Query(..., description="Prefix")) -> list[str]:
        """Indexed words starting with the prefix."""
        return app.search_engine.suggestions(q)

    return router
