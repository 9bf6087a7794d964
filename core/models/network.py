from dataclasses import dataclass
from enum import Enum
from typing import Any, Self


class RequestStatus(str, Enum):
    """Lifecycle status of the tracked lookup."""

    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class RequestState:
    status: RequestStatus
    data: Any = None  # looked-up record, required when resolved
    error: Any = None  # failure content, only when rejected

    def __post_init__(self) -> None:
        if self.status in (RequestStatus.IDLE, RequestStatus.PENDING):
            if self.data is not None or self.error is not None:
                raise ValueError(f"{self.status.value} state cannot carry data or error")
        elif self.status == RequestStatus.RESOLVED:
            if self.error is not None:
                raise ValueError("resolved state cannot carry an error")
            if self.data is None:
                raise ValueError("resolved state requires data")
        elif self.status == RequestStatus.REJECTED:
            if self.data is not None:
                raise ValueError("rejected state cannot carry data")
            if self.error is None:
                raise ValueError("rejected state requires an error")

    @classmethod
    def idle(cls) -> Self:
        return cls(RequestStatus.IDLE)

    @classmethod
    def pending(cls) -> Self:
        return cls(RequestStatus.PENDING)

    @classmethod
    def resolved(cls, data: Any) -> Self:
        return cls(RequestStatus.RESOLVED, data=data)

    @classmethod
    def rejected(cls, error: Any) -> Self:
        return cls(RequestStatus.REJECTED, error=error)


def has_content(identifier: str | None) -> bool:
    return bool(identifier and identifier.strip())


def initial_state(identifier: str | None = None) -> RequestState:
    """Pending when created with something to look up, idle otherwise."""
    return RequestState.pending() if has_content(identifier) else RequestState.idle()
