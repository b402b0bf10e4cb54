"""Shared fixtures."""

import pytest

from lognormal.quotes import Observer


class Counter(Observer):
    """Observer counting the notifications it receives."""

    def __init__(self):
        self.count = 0

    def update(self):
        self.count += 1


@pytest.fixture
def counter():
    return Counter()
