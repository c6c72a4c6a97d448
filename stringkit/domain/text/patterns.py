"""Guarded Pattern Matching Module
Evaluates regular expressions under an execution-time budget.

Matching runs on the ``regex`` engine, which checks its ``timeout`` inside the
matching loop, so a pathological pattern is stopped by the engine itself
instead of being abandoned on a worker thread. An exceeded budget is reported
as a ``MatchOutcome`` with ``MatchStatus.TIMED_OUT``; the convenience methods
(`matches`, `extract_all`, `replace`) fold it into their negative result.
"""

import re
import time
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, ClassVar

import regex
from kink import di

DEFAULT_TIMEOUT_SECONDS = 2.0
DEFAULT_CACHE_SIZE = 256

PatternLike = str | regex.Pattern | re.Pattern
Replacement = str | Callable[[Any], str]

# stdlib flag bit -> regex flag bit; the two engines number ASCII differently
STDLIB_FLAGS: dict[int, int] = {
    re.IGNORECASE: regex.IGNORECASE,
    re.LOCALE: regex.LOCALE,
    re.MULTILINE: regex.MULTILINE,
    re.DOTALL: regex.DOTALL,
    re.UNICODE: regex.UNICODE,
    re.VERBOSE: regex.VERBOSE,
    re.ASCII: regex.ASCII,
}


@dataclass(frozen=True, slots=True)
class PatternBudget:
    """Execution-time ceiling for a single pattern evaluation."""

    seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.seconds > 0:
            msg = f'pattern budget must be positive: {self.seconds}'
            raise ValueError(msg)


class MatchStatus(Enum):
    MATCHED = 'matched'
    NO_MATCH = 'no_match'
    TIMED_OUT = 'timed_out'
    INVALID = 'invalid'


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    """Result of a guarded evaluation.

    ``value`` carries the match object, the extracted strings or the
    substituted text depending on the operation that produced it.
    """

    status: MatchStatus
    value: Any = None

    @property
    def matched(self) -> bool:
        return self.status is MatchStatus.MATCHED

    @property
    def timed_out(self) -> bool:
        return self.status is MatchStatus.TIMED_OUT


_INVALID = MatchOutcome(MatchStatus.INVALID)
_NO_MATCH = MatchOutcome(MatchStatus.NO_MATCH)
_TIMED_OUT = MatchOutcome(MatchStatus.TIMED_OUT)


def _compile_pattern(source: str, flags: int) -> regex.Pattern:
    return regex.compile(source, flags)


def _translate_flags(flags: int) -> int:
    translated = 0
    for stdlib_flag, regex_flag in STDLIB_FLAGS.items():
        if flags & stdlib_flag:
            translated |= regex_flag
    return translated

class GuardedMatcher:
    """Pattern evaluation bounded by a ``PatternBudget``.

    Patterns may be given precompiled (preferred, see ``PatternRegistry``) or
    as raw text; raw text is compiled once and kept in a bounded cache.
    """

    def __init__(
        self,
        budget: PatternBudget | None = None,
        cache_size: int = DEFAULT_CACHE_SIZE,
    ) -> None:
        self.budget = budget or PatternBudget()
        self._compile = lru_cache(maxsize=cache_size)(_compile_pattern)

    # ---------- Outcomes ----------
    def search(self, text: str | None, pattern: PatternLike | None) -> MatchOutcome:
        """Search *text* for *pattern*; the outcome value is the match object."""
        compiled = self._resolve(pattern)
        if compiled is None or not text:
            return _INVALID

        return self._guard(
            lambda: compiled.search(text, timeout=self.budget.seconds)
        )

    def find_all(self, text: str | None, pattern: PatternLike | None) -> MatchOutcome:
        """Collect every whole-match value; the whole scan shares one budget."""
        compiled = self._resolve(pattern)
        if compiled is None or not text:
            return _INVALID

        def scan() -> list[str] | None:
            deadline = time.monotonic() + self.budget.seconds
            found: list[str] = []
            pos = 0
            while pos <= len(text):
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError('regex timed out')

                match = compiled.search(text, pos, timeout=remaining)
                if match is None:
                    break

                found.append(match.group(0))
                empty = match.end() == match.start()
                pos = match.end() + 1 if empty else match.end()
            return found or None

        return self._guard(scan)

    def substitute(
        self, text: str | None, pattern: PatternLike | None, repl: Replacement
    ) -> MatchOutcome:
        """Replace every match of *pattern*; the outcome value is the new text.

        A completed substitution is reported as ``MATCHED`` even when nothing
        was replaced.
        """
        compiled = self._resolve(pattern)
        if compiled is None or text is None:
            return _INVALID

        return self._guard(
            lambda: compiled.sub(repl, text, timeout=self.budget.seconds)
        )

    # ---------- Convenience ----------
    def matches(self, text: str | None, pattern: PatternLike | None) -> bool:
        return self.search(text, pattern).matched

    def extract_all(self, text: str | None, pattern: PatternLike | None) -> list[str]:
        outcome = self.find_all(text, pattern)
        return outcome.value if outcome.matched else []

    def replace(
        self, text: str | None, pattern: PatternLike | None, repl: Replacement
    ) -> str | None:
        """Guarded substitution; ``None`` when the budget is exceeded or invalid."""
        outcome = self.substitute(text, pattern, repl)
        return outcome.value if outcome.matched else None

    # ---------- Internals ----------
    def _resolve(self, pattern: PatternLike | None) -> regex.Pattern | None:
        if pattern is None:
            return None

        if isinstance(pattern, regex.Pattern):
            return pattern if pattern.pattern else None

        if isinstance(pattern, re.Pattern):
            source, flags = pattern.pattern, _translate_flags(pattern.flags)
        else:
            source, flags = pattern, 0

        if not source or not isinstance(source, str):
            return None

        try:
            return self._compile(source, flags)

        except regex.error:
            return None

    @staticmethod
    def _guard(evaluate: Callable[[], Any]) -> MatchOutcome:
        try:
            value = evaluate()

        except TimeoutError:
            return _TIMED_OUT

        if value is None:
            return _NO_MATCH

        return MatchOutcome(MatchStatus.MATCHED, value)


class PatternRegistry(Mapping[str, regex.Pattern]):
    """Immutable name -> compiled pattern lookup built once per process."""

    DEFAULT_SOURCES: ClassVar[dict[str, tuple[str, int]]] = {
        'email': (r'^[^@\s]+@[^@\s]+\.[^@\s]+$', regex.IGNORECASE),
        'url': (r'^(http|https)://[^\s$.?#].[^\s]*$', regex.IGNORECASE),
        'hex_color': (r'^#(?:[0-9a-fA-F]{3}){1,2}$', 0),
        'phone': (r'^\+?[0-9]{7,15}$', 0),
        'username': (r'^[\w.\-]+$', 0),
        'html_tag': (r'<.*?>', 0),
        'credit_card_candidate': (r'\b(?:[0-9]{4}[-\s]?){3}[0-9]{4}\b', 0),
        'slug_invalid_chars': (r'[^a-z0-9\s-]', 0),
        'slug_whitespace': (r'\s+', 0),
        'slug_hyphens': (r'-+', 0),
    }

    def __init__(self, patterns: Mapping[str, regex.Pattern]) -> None:
        self._patterns = MappingProxyType(dict(patterns))

    @classmethod
    def compile(cls, sources: Mapping[str, str | tuple[str, int]]) -> 'PatternRegistry':
        compiled = {}
        for name, source in sources.items():
            text, flags = source if isinstance(source, tuple) else (source, 0)
            compiled[name] = regex.compile(text, flags)
        return cls(compiled)

    @classmethod
    def default(cls) -> 'PatternRegistry':
        return cls.compile(cls.DEFAULT_SOURCES)

    def __getitem__(self, name: str) -> regex.Pattern:
        return self._patterns[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)


def _ensure_wired() -> None:
    if GuardedMatcher not in di or PatternRegistry not in di:
        from stringkit.core.container import wire_dependencies  # noqa: PLC0415

        wire_dependencies()


def resolve_matcher() -> GuardedMatcher:
    """Return the container's matcher, wiring the defaults on first use."""
    _ensure_wired()
    return di[GuardedMatcher]


def resolve_registry() -> PatternRegistry:
    _ensure_wired()
    return di[PatternRegistry]


def matches(text: str | None, pattern: PatternLike | None) -> bool:
    return resolve_matcher().matches(text, pattern)


def extract_all(text: str | None, pattern: PatternLike | None) -> list[str]:
    return resolve_matcher().extract_all(text, pattern)
