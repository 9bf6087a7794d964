from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class RequestStarted:
    pass


@dataclass(frozen=True)
class RequestSucceeded:
    data: Any


@dataclass(frozen=True)
class RequestFailed:
    error: Any


@dataclass(frozen=True)
class RequestReset:
    pass


RequestEvent: TypeAlias = RequestStarted | RequestSucceeded | RequestFailed | RequestReset
