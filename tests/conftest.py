"""Global pytest fixtures for stringkit."""

from __future__ import annotations

import pytest
from kink import di
from loguru import logger

from stringkit.core.config import Configuration
from stringkit.core.container import wire_dependencies
from stringkit.domain.text.patterns import (
    GuardedMatcher,
    PatternBudget,
    PatternRegistry,
)


@pytest.fixture(autouse=True)
def wired() -> None:
    """Wire the container with default settings for every test."""
    wire_dependencies(Configuration())


@pytest.fixture
def library_logging():
    """Let stringkit records reach loguru sinks for the duration of a test."""
    logger.enable('stringkit')
    yield
    logger.disable('stringkit')

@pytest.fixture
def registry() -> PatternRegistry:
    return di[PatternRegistry]


@pytest.fixture
def matcher() -> GuardedMatcher:
    return di[GuardedMatcher]


@pytest.fixture
def short_matcher() -> GuardedMatcher:
    """Matcher with a half-second budget for pathological-input tests."""
    return GuardedMatcher(PatternBudget(0.5))


class ExpiredPattern:
    """Stand-in compiled pattern whose engine always reports a timeout."""

    pattern = 'expired'

    def search(self, *args, **kwargs):
        raise TimeoutError('regex timed out')

    def sub(self, *args, **kwargs):
        raise TimeoutError('regex timed out')


@pytest.fixture
def expired_matcher(monkeypatch: pytest.MonkeyPatch) -> GuardedMatcher:
    """Matcher for which every evaluation exceeds its budget."""
    expired = GuardedMatcher(PatternBudget(0.01))
    monkeypatch.setattr(expired, '_resolve', lambda pattern: ExpiredPattern())
    return expired


@pytest.fixture
def expired_container(expired_matcher: GuardedMatcher) -> GuardedMatcher:
    """Register the always-expired matcher as the container's matcher."""
    di[GuardedMatcher] = expired_matcher
    return expired_matcher
