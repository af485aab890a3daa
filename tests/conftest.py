"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from huddle.domain.value import UserId


def pytest_configure(config):
    # Keep spans local; nothing leaves the test process
    logfire.configure(send_to_logfire=False, console=False)


def make_user() -> UserId:
    """Fresh user id for a test actor."""
    return UserId(uuid4())


@pytest.fixture
def alice() -> UserId:
    return make_user()


@pytest.fixture
def bob() -> UserId:
    return make_user()


@pytest.fixture
def carol() -> UserId:
    return make_user()
