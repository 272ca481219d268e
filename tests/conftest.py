"""
Shared pytest fixtures.

The ``tracker`` fixture is a fully wired WorkoutTracker over in-memory
fakes: a fake local store, fake Supabase repositories, a fake auth gateway,
a fixed clock, manual tickers and a synchronous push executor.
"""
import pytest

from application.local_persistence import LocalPersistence
from application.remote_pusher import RemotePusher
from application.tracker import WorkoutTracker
from application.use_cases.authenticate import AuthService
from domain.models import TemplateExercise

from tests.fakes import (
    FakeAuthGateway,
    FakeClock,
    FakeKeyValueStore,
    ImmediateExecutor,
    ManualTickerFactory,
    create_remote_repositories,
)

INVITE_CODE = "LIFT-TOGETHER"
CREATOR_EMAIL = "coach@example.com"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tickers():
    return ManualTickerFactory()


@pytest.fixture
def store():
    return FakeKeyValueStore()


@pytest.fixture
def persistence(store):
    return LocalPersistence(store)


@pytest.fixture
def executor():
    return ImmediateExecutor()


@pytest.fixture
def pusher(executor):
    return RemotePusher(executor=executor)


@pytest.fixture
def remote_repos():
    return create_remote_repositories()


@pytest.fixture
def auth_gateway():
    return FakeAuthGateway()


@pytest.fixture
def tracker(persistence, pusher, remote_repos, auth_gateway, clock, tickers):
    tracker = WorkoutTracker(
        persistence,
        pusher=pusher,
        remote_repos=remote_repos,
        auth=AuthService(auth_gateway, invite_code=INVITE_CODE, creator_emails=[CREATOR_EMAIL]),
        clock=clock,
        ticker_factory=tickers,
    )
    tracker.load()
    yield tracker
    tracker.close()


@pytest.fixture
def push_day(tracker):
    """A saved "Push Day" template with two exercises."""
    result = tracker.templates.create(
        "Push Day",
        [
            TemplateExercise(name="Bench Press (Barbell)", equipment="Barbell", muscle_group="Chest"),
            TemplateExercise(name="Overhead Press (Barbell)", equipment="Barbell", muscle_group="Shoulders"),
        ],
    )
    assert result.success
    return result.value
