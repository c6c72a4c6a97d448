from kink import di
from loguru import logger

from stringkit.core.config import Configuration, get_config
from stringkit.domain.text.patterns import (
    GuardedMatcher,
    PatternBudget,
    PatternRegistry,
)


def wire_dependencies(config: Configuration | None = None) -> None:
    _wire_core_dependencies(config)
    _wire_pattern_dependencies()


# noinspection PyArgumentList
def _wire_core_dependencies(config: Configuration | None) -> None:
    """Wire core library dependencies."""
    di[Configuration] = config or get_config()


def _wire_pattern_dependencies() -> None:
    """Compile the shared patterns once and register the matcher."""
    patterns = di[Configuration].patterns

    di[PatternBudget] = PatternBudget(patterns.timeout)
    di[PatternRegistry] = PatternRegistry.default()
    di[GuardedMatcher] = GuardedMatcher(
        di[PatternBudget], cache_size=patterns.cache_size
    )

    logger.debug(
        'pattern registry wired',
        patterns=len(di[PatternRegistry]),
        timeout=patterns.timeout,
    )
