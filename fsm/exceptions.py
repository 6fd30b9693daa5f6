"""
FSM exception hierarchy.
"""
from typing import Optional


class FSMError(Exception):
    """Base exception for FSM errors."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(FSMError):
    """Configuration is missing or invalid."""


class InvalidStateError(FSMError):
    """Target state is not declared in the configuration."""

    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"Status not supported: {state!r}")


class InvalidEventError(FSMError):
    """Event has no transition from the current state."""

    def __init__(self, event: str, state: str) -> None:
        self.event = event
        self.state = state
        super().__init__(f"Invalid event {event!r} for state {state!r}")
