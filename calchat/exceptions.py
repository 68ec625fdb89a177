"""Domain errors raised by calchat."""


class CalchatError(Exception):
    """Base class for calchat errors."""


class PollNotFoundError(CalchatError):
    """No poll is registered under the given id."""

    def __init__(self, poll_id: str):
        super().__init__(f"Poll not found: {poll_id}")
        self.poll_id = poll_id


class PollClosedError(CalchatError):
    """Vote cast on a closed poll."""

    def __init__(self, poll_id: str):
        super().__init__(f"Poll is closed: {poll_id}")
        self.poll_id = poll_id


class UnknownPollOptionError(CalchatError):
    """Vote cast for an option the poll does not have."""

    def __init__(self, poll_id: str, option_id: str):
        super().__init__(f"Poll {poll_id} has no option {option_id}")
        self.poll_id = poll_id
        self.option_id = option_id


class InvalidRecurrenceRuleError(CalchatError):
    """Recurrence rule or start date cannot be expanded."""
