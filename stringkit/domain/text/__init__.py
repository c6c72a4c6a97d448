from .checksum import luhn_valid
from .conversion import ConversionTarget, Parsable, try_convert
from .normalization import strip_marks
from .patterns import (
    GuardedMatcher,
    MatchOutcome,
    MatchStatus,
    PatternBudget,
    PatternRegistry,
    extract_all,
    matches,
)
from .slug import generate_slug

__all__ = [
    'ConversionTarget',
    'GuardedMatcher',
    'MatchOutcome',
    'MatchStatus',
    'Parsable',
    'PatternBudget',
    'PatternRegistry',
    'extract_all',
    'generate_slug',
    'luhn_valid',
    'matches',
    'strip_marks',
    'try_convert',
]
