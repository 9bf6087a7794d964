"""Transition function for the lookup request lifecycle."""

from core.models.events import (
    RequestEvent,
    RequestFailed,
    RequestReset,
    RequestStarted,
    RequestSucceeded,
)
from core.models.network import RequestState


class UnhandledEventError(RuntimeError):
    """An event the reducer does not know about was dispatched."""


def apply(state: RequestState, event: RequestEvent) -> RequestState:
    """
    Return the state that follows `state` once `event` is applied.

    Results are applied whatever the current status is: a late result from a
    superseded lookup overwrites the state it finds.

    Raises:
        UnhandledEventError: `event` is not a known request event
    """
    match event:
        case RequestStarted():
            return RequestState.pending()
        case RequestSucceeded(data=data):
            return RequestState.resolved(data)
        case RequestFailed(error=error):
            return RequestState.rejected(error)
        case RequestReset():
            return RequestState.idle()
        case _:
            raise UnhandledEventError(f"Unhandled event: {event!r} (state {state.status.value})")
