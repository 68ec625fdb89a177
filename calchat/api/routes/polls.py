"""Poll API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import IApplication
from ...exceptions import PollClosedError, PollNotFoundError, UnknownPollOptionError
from ...models import Poll
from ...polls import close_poll, create_poll, poll_results, vote


class CreatePollRequest(BaseModel):
    """Request model for creating a poll."""

    question: str
    options: list[str]
    group_id: str
    user_id: str


class VoteRequest(BaseModel):
    """Request model for voting."""

    option_id: str
    user_id: str


class PollOptionResponse(BaseModel):
    """Response model for poll option."""

    id: str
    text: str
    votes: list[str]


class PollResponse(BaseModel):
    """Response model for poll."""

    id: str
    question: str
    options: list[PollOptionResponse]
    created_by: str
    group_id: str
    created_at: str
    closed: bool
    results: dict[str, int]


def _poll_response(poll: Poll) -> dict:
    return {
        "id": poll.id,
        "question": poll.question,
        "options": [{"id": o.id, "text": o.text, "votes": list(o.votes)} for o in poll.options],
        "created_by": poll.created_by,
        "group_id": poll.group_id,
        "created_at": poll.created_at,
        "closed": poll.closed,
        "results": poll_results(poll),
    }


def create_polls_router(app: IApplication) -> APIRouter:
    """Create polls router."""
    router = APIRouter(prefix="/api/polls", tags=["polls"])

    @router.post("", response_model=PollResponse, status_code=201)
    async def new_poll(request: CreatePollRequest) -> dict:
        """Open a poll in a group."""
        if not request.options:
            raise HTTPException(status_code=400, detail="A poll needs at least one option")
        poll = create_poll(request.question, request.options, request.group_id, request.user_id)
        app.polls.add(poll)
        return _poll_response(poll)

    @router.get("", response_model=list[PollResponse])
    async def list_polls(
        group_id: str | None = Query(None, description="Filter by group"),
    ) -> list[dict]:
        """List polls."""
        return [_poll_response(p) for p in app.polls.list_polls(group_id)]

    @router.get("/{poll_id}", response_model=PollResponse)
    async def get_poll(poll_id: str) -> dict:
        """Get a poll with its tally."""
        try:
            return _poll_response(app.polls.get(poll_id))
        except PollNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @router.post("/{poll_id}/votes", response_model=PollResponse)
    async def cast_vote(poll_id: str, request: VoteRequest) -> dict:
        """Vote for an option."""
        try:
            poll = vote(app.polls.get(poll_id), request.option_id, request.user_id)
            return _poll_response(poll)
        except PollNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except UnknownPollOptionError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except PollClosedError as e:
            raise HTTPException(status_code=409, detail=str(e))

    @router.post("/{poll_id}/close", response_model=PollResponse)
    async def close(poll_id: str) -> dict:
        """Close a poll to further votes."""
        try:
            return _poll_response(close_poll(app.polls.get(poll_id)))
        except PollNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    return router
