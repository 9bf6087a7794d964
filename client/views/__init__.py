from client.views.base import BaseView, UnhandledStatusError
from client.views.error import ErrorView
from client.views.idle import IdleView
from client.views.pending import PendingView
from client.views.user import UserView
from core.models.network import RequestStatus

VIEWS_MAP: dict[RequestStatus, type[BaseView]] = {
    RequestStatus.IDLE: IdleView,
    RequestStatus.PENDING: PendingView,
    RequestStatus.RESOLVED: UserView,
    RequestStatus.REJECTED: ErrorView,
}
"""Mapping of request statuses to the view that renders them."""


def select_view(status: RequestStatus) -> type[BaseView]:
    """
    Pick the view for `status`.

    Raises:
        UnhandledStatusError: `status` has no view
    """
    try:
        return VIEWS_MAP[status]
    except KeyError:
        raise UnhandledStatusError(f"Unhandled status: {status}") from None


__all__ = ["VIEWS_MAP", "BaseView", "UnhandledStatusError", "select_view"]
