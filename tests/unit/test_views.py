from __future__ import annotations

from types import SimpleNamespace

import pygame
import pytest

from client.scenes.search import SearchScene
from client.views import (
    VIEWS_MAP,
    UnhandledStatusError,
    select_view,
)
from client.views.error import BOX_PADDING, ErrorView
from client.views.idle import IdleView
from client.views.pending import PendingView
from client.views.user import UserView
from core.models.network import RequestState, RequestStatus
from core.models.user import GithubUser

OCTOCAT = GithubUser(
    login="octocat",
    name="The Octocat",
    avatar_url="https://avatars.githubusercontent.com/u/583231?v=4",
    html_url="https://github.com/octocat",
    bio="GitHub mascot",
    location="San Francisco",
)


@pytest.mark.parametrize(
    "status, view",
    [
        (RequestStatus.IDLE, IdleView),
        (RequestStatus.PENDING, PendingView),
        (RequestStatus.RESOLVED, UserView),
        (RequestStatus.REJECTED, ErrorView),
    ],
)
def test_each_status_selects_exactly_one_view(status, view):
    assert select_view(status) is view


def test_every_status_has_a_view():
    assert set(VIEWS_MAP) == set(RequestStatus)


def test_unknown_status_is_fatal():
    with pytest.raises(UnhandledStatusError):
        select_view("archived")  # type: ignore[arg-type]


class FakeUserService:
    def __init__(self, state: RequestState, username: str | None = None) -> None:
        self.state = state
        self.username = username
        self.searches: list[str | None] = []
        self.cleared = 0

    def search(self, username):
        self.searches.append(username)

    def clear(self):
        self.cleared += 1


@pytest.fixture
def app():
    pygame.init()
    screen = pygame.display.set_mode((900, 640))
    yield SimpleNamespace(
        screen=screen,
        screen_center=(450, 320),
        settings=SimpleNamespace(client_title="GitHub Profile Finder"),
        user_service=FakeUserService(RequestState.idle()),
        avatar_service=SimpleNamespace(image=None),
    )
    pygame.quit()


@pytest.mark.parametrize(
    "state, view",
    [
        (RequestState.idle(), IdleView),
        (RequestState.pending(), PendingView),
        (RequestState.resolved(OCTOCAT), UserView),
        (RequestState.rejected("404 Not Found"), ErrorView),
    ],
)
def test_scene_renders_the_view_for_current_state(app, state, view):
    app.user_service = FakeUserService(state, username="octocat")
    scene = SearchScene(app)

    scene.update()

    assert type(scene.view) is view


def test_error_view_shows_error_verbatim(app):
    app.user_service = FakeUserService(RequestState.rejected("404 Not Found"))
    scene = SearchScene(app)

    scene.update()

    assert scene.view.details.label == "404 Not Found"


def test_user_view_shows_profile_fields(app):
    app.user_service = FakeUserService(RequestState.resolved(OCTOCAT), username="octocat")
    scene = SearchScene(app)

    scene.update()

    assert scene.view.name.label == "The Octocat"
    assert scene.view.url.label == "https://github.com/octocat"


def test_pending_view_names_the_user_being_looked_up(app):
    app.user_service = FakeUserService(RequestState.pending(), username="octocat")
    scene = SearchScene(app)

    scene.update()

    assert scene.view.spinner.holder == "Loading octocat"


def test_enter_submits_and_escape_clears(app):
    scene = SearchScene(app)
    scene.input.value = "octocat"

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN, unicode="\r"))
    scene.update()
    assert app.user_service.searches == ["octocat"]

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, unicode="\x1b"))
    scene.update()
    assert app.user_service.cleared == 1
    assert scene.input.value == ""


def test_error_box_fits_the_wrapped_error(app):
    app.user_service = FakeUserService(RequestState.rejected("404 Not Found"))
    scene = SearchScene(app)
    scene.update()
    short_box = scene.view.box.copy()

    long_error = " ".join(["API rate limit exceeded for 203.0.113.7."] * 5)
    app.user_service.state = RequestState.rejected(long_error)
    scene.update()

    _, text_height = scene.view.details.measure()
    assert scene.view.box.height == text_height + 2 * BOX_PADDING
    assert scene.view.box.height > short_box.height


def test_search_button_is_disabled_while_input_is_blank(app):
    scene = SearchScene(app)
    click = pygame.event.Event(
        pygame.MOUSEBUTTONDOWN, button=1, pos=scene.search_button.rect.center
    )

    scene.update()
    assert scene.search_button.is_disabled
    scene.search_button.handle_event(click)
    assert app.user_service.searches == []

    scene.input.value = "octocat"
    scene.update()
    assert not scene.search_button.is_disabled
    scene.search_button.handle_event(click)
    assert app.user_service.searches == ["octocat"]
