"""String Utilities Module
Provides a collection of helper functions for common string operations.
"""

import regex

from stringkit.domain.text.normalization import strip_marks
from stringkit.domain.text.patterns import resolve_matcher
from stringkit.domain.text.slug import generate_slug


class StringUtils:
    """Collection of static string utility methods."""

    _WORD_BOUNDARY_RE = regex.compile(r'([a-z0-9])([A-Z])')
    _CAMEL_BOUNDARY_RE = regex.compile(r'([a-z])([A-Z])')

    # ---------- Normalization ----------
    @staticmethod
    def normalize_whitespace(text: str) -> str:
        """Collapse consecutive whitespace in *text* to single spaces and trim ends."""
        return ' '.join(text.split())

    @staticmethod
    def remove_diacritics(text: str | None) -> str | None:
        """Remove diacritical marks (accents) from characters in *text*."""
        if not text:
            return text
        return strip_marks(text) or text

    # ---------- Case Conversion ----------
    @staticmethod
    def _join_boundaries(text: str, pattern: regex.Pattern, separator: str) -> str:
        joined = resolve_matcher().replace(text, pattern, rf'\1{separator}\2')
        return joined if joined is not None else ''

    @staticmethod
    def to_snake(text: str | None) -> str:
        """Convert *text* from camelCase / PascalCase to snake_case."""
        if not text:
            return ''
        return StringUtils._join_boundaries(
            text, StringUtils._WORD_BOUNDARY_RE, '_'
        ).lower()

    @staticmethod
    def to_kebab(text: str | None) -> str:
        """Convert *text* from camelCase / PascalCase to kebab-case."""
        if not text:
            return ''
        return StringUtils._join_boundaries(
            text, StringUtils._WORD_BOUNDARY_RE, '-'
        ).lower()

    @staticmethod
    def split_camel(text: str | None) -> str:
        """Split camelCase / PascalCase *text* into space separated words."""
        if not text:
            return ''
        return StringUtils._join_boundaries(text, StringUtils._CAMEL_BOUNDARY_RE, ' ')

    # ---------- Generation ----------
    @staticmethod
    def slugify(text: str | None, max_length: int | None = 80) -> str:
        """Generate URL slug from *text* limited to *max_length*."""
        slug = generate_slug(text)
        if max_length:
            slug = slug[:max_length].rstrip('-')
        return slug

    @staticmethod
    def to_initials(text: str | None, max_initials: int | None = None) -> str:
        """Uppercase first letters of the whitespace separated words in *text*."""
        if not text or text.isspace():
            return ''

        initials = [word[0].upper() for word in text.split() if word[0].isalpha()]
        return ''.join(initials[:max_initials])

    @staticmethod
    def reverse(text: str | None) -> str:
        return text[::-1] if text else ''
