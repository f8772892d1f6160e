"""Shared fixtures."""

import pytest

from app.repositories.common.cache import ResultCache
from tests.helpers import Clock, FakeBackend


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def cache(clock):
    return ResultCache(clock=clock)


@pytest.fixture
def backend():
    return FakeBackend()
