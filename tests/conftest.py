"""Pytest configuration and fixtures."""

import logging
from typing import Callable, Iterator

import pytest

from enroll_advisor.models import School, SchoolState
from enroll_advisor.store import Roster
from tests.factories import make_school, make_state


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo ``setup_logging`` calls made by a test."""
    root = logging.getLogger()
    package = logging.getLogger("enroll_advisor")
    handlers = root.handlers[:]
    levels = (root.level, package.level)
    yield
    root.handlers[:] = handlers
    root.setLevel(levels[0])
    package.setLevel(levels[1])


@pytest.fixture
def school_factory() -> Callable[..., School]:
    return make_school


@pytest.fixture
def state_factory() -> Callable[..., SchoolState]:
    return make_state


@pytest.fixture
def roster_of() -> Callable[..., Roster]:
    """Build a roster from states, keeping argument order."""

    def _build(*states: SchoolState) -> Roster:
        return Roster(tuple(states))

    return _build
