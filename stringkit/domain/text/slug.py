"""Slug Generation Module
Turns arbitrary text into a lowercase, hyphen-separated, URL-safe token.
"""

from stringkit.domain.text.normalization import strip_marks
from stringkit.domain.text.patterns import (
    GuardedMatcher,
    PatternRegistry,
    resolve_matcher,
    resolve_registry,
)

# Turkish dotless/dotted i would otherwise strip to a different letter
SPECIAL_CASES: dict[str, str] = {
    'ı': 'i',
    'İ': 'i',
}

_SPECIAL_CASES_TABLE = str.maketrans(SPECIAL_CASES)


def generate_slug(
    text: str | None,
    matcher: GuardedMatcher | None = None,
    registry: PatternRegistry | None = None,
) -> str:
    """Convert *text* into a URL-friendly slug.

    Returns ``''`` for blank input, for input that has no slug-safe
    characters, and whenever one of the cleanup patterns exceeds its budget.
    """
    if not text or text.isspace():
        return ''

    matcher = matcher or resolve_matcher()
    registry = registry or resolve_registry()

    clean = strip_marks(text.translate(_SPECIAL_CASES_TABLE)).lower()

    for name, repl in (
        ('slug_invalid_chars', ''),
        ('slug_whitespace', '-'),
        ('slug_hyphens', '-'),
    ):
        replaced = matcher.replace(clean, registry[name], repl)
        if replaced is None:
            return ''
        clean = replaced

    return clean.strip('-')
