"""Group polls."""

import secrets
from datetime import datetime, timezone

from .exceptions import PollClosedError, PollNotFoundError, UnknownPollOptionError
from .logging_config import get_logger
from .models import Poll, PollOption

logger = get_logger(__name__)


def create_poll(question: str, options: list[str], group_id: str, user_id: str) -> Poll:
    """Open a poll in a group. Options get ids ``opt0``, ``opt1``, ..."""
    return Poll(
        id=secrets.token_hex(6),
        question=question,
        options=[PollOption(id=f"opt{i}", text=text) for i, text in enumerate(options)],
        created_by=user_id,
        group_id=group_id,
        created_at=datetime.now(timezone.utc).isoformat(),
    )


def vote(poll: Poll, option_id: str, user_id: str) -> Poll:
    """Record a user's vote, replacing any earlier vote of theirs."""
    if poll.closed:
        raise PollClosedError(poll.id)

    target = next((o for o in poll.options if o.id == option_id), None)
    if target is None:
        raise UnknownPollOptionError(poll.id, option_id)

    for option in poll.options:
        if user_id in option.votes:
            option.votes.remove(user_id)
    target.votes.append(user_id)
    return poll


def close_poll(poll: Poll) -> Poll:
    poll.closed = True
    return poll


def poll_results(poll: Poll) -> dict[str, int]:
    """Vote count per option id."""
    return {option.id: len(option.votes) for option in poll.options}


class PollRegistry:
    """In-memory polls, keyed by id."""

    def __init__(self):
        self._polls: dict[str, Poll] = {}

    def add(self, poll: Poll) -> Poll:
        self._polls[poll.id] = poll
        logger.info(f"Poll created: {poll.id} in group {poll.group_id}")
        return poll

    def get(self, poll_id: str) -> Poll:
        try:
            return self._polls[poll_id]
        except KeyError:
            raise PollNotFoundError(poll_id) from None

    def list_polls(self, group_id: str | None = None) -> list[Poll]:
        return [p for p in self._polls.values() if group_id is None or p.group_id == group_id]

    def clear(self) -> None:
        self._polls.clear()
