from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.imagery import ExerciseDescriptor, WorkoutContext
from app.recommendation.selector import ImageSelector
from tests.fakes import FakeRng


@pytest.fixture
def fake_rng() -> FakeRng:
    return FakeRng(index=1)


@pytest.fixture
def selector(fake_rng) -> ImageSelector:
    return ImageSelector(rng=fake_rng)  # type: ignore[arg-type]


# --------------- Item Factories ---------------


@pytest.fixture
def exercise_factory() -> Callable[..., ExerciseDescriptor]:
    def _make(name: str = "Bench Press", muscle_group: str | None = "chest"):
        return ExerciseDescriptor(name=name, muscle_group=muscle_group)

    return _make


@pytest.fixture
def context_factory() -> Callable[..., WorkoutContext]:
    def _make(**overrides: Any) -> WorkoutContext:
        return WorkoutContext(**overrides)

    return _make


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture
def client(app_instance):
    """Plain client, real dependencies."""
    return TestClient(app_instance, raise_server_exceptions=False)
