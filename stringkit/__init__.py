__version__ = '1.0.0'

from loguru import logger  # noqa: E402

from stringkit.domain.text import (  # noqa: E402
    ConversionTarget,
    GuardedMatcher,
    MatchOutcome,
    MatchStatus,
    Parsable,
    PatternBudget,
    PatternRegistry,
    extract_all,
    generate_slug,
    luhn_valid,
    matches,
    strip_marks,
    try_convert,
)

# silent until the host application calls setup_logging()
logger.disable('stringkit')

__all__ = [
    'ConversionTarget',
    'GuardedMatcher',
    'MatchOutcome',
    'MatchStatus',
    'Parsable',
    'PatternBudget',
    'PatternRegistry',
    '__version__',
    'extract_all',
    'generate_slug',
    'luhn_valid',
    'matches',
    'strip_marks',
    'try_convert',
]
