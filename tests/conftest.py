"""Shared fixtures."""

import pytest

from tests.fakes import FakeTransport


@pytest.fixture
def fake_transport():
    """Transport answering 200 with an empty body."""
    return FakeTransport()
