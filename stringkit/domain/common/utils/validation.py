"""Validation Utilities Module
Format checks for user-supplied strings. Pattern-based checks run through the
guarded matcher; a check whose pattern exceeds its budget fails and is logged.
"""

import base64
import datetime as _dt
import ipaddress
import json
import uuid
from urllib.parse import urlsplit
from xml.parsers import expat

from loguru import logger

from stringkit.domain.text.checksum import luhn_valid
from stringkit.domain.text.conversion import try_convert
from stringkit.domain.text.patterns import (
    MatchOutcome,
    PatternLike,
    resolve_matcher,
    resolve_registry,
)


class Validators:
    """Collection of static string validation methods."""

    @staticmethod
    def _report(outcome: MatchOutcome, pattern: str, text: str) -> MatchOutcome:
        if outcome.timed_out:
            logger.warning('pattern budget exceeded', pattern=pattern, length=len(text))
        return outcome

    @staticmethod
    def _check(text: str | None, name: str) -> bool:
        if not text or text.isspace():
            return False

        outcome = resolve_matcher().search(text, resolve_registry()[name])
        return Validators._report(outcome, name, text).matched

    # ---------- Pattern Formats ----------
    @staticmethod
    def is_email(text: str | None) -> bool:
        return Validators._check(text, 'email')

    @staticmethod
    def is_url(text: str | None) -> bool:
        """Absolute ``http``/``https`` URL with a host."""
        if not Validators._check(text, 'url'):
            return False

        try:
            return bool(urlsplit(text).hostname)

        except ValueError:
            return False

    @staticmethod
    def is_hex_color(text: str | None) -> bool:
        return Validators._check(text, 'hex_color')

    @staticmethod
    def is_phone(text: str | None) -> bool:
        return Validators._check(text, 'phone')

    @staticmethod
    def is_username(
        text: str | None, min_length: int = 3, max_length: int = 20
    ) -> bool:
        """Letters, digits, ``_``, ``-`` and ``.`` within the length bounds."""
        if not text or not min_length <= len(text) <= max_length:
            return False
        return Validators._check(text, 'username')

    @staticmethod
    def matches_regex(text: str | None, pattern: PatternLike | None) -> bool:
        if not text:
            return False

        outcome = resolve_matcher().search(text, pattern)
        return Validators._report(outcome, 'custom', text).matched

    @staticmethod
    def extract_matches(text: str | None, pattern: PatternLike | None) -> list[str]:
        if not text:
            return []

        outcome = Validators._report(
            resolve_matcher().find_all(text, pattern), 'custom', text
        )
        return outcome.value if outcome.matched else []

    # ---------- Checksums & Identifiers ----------
    @staticmethod
    def is_credit_card(text: str | None) -> bool:
        return luhn_valid(text)

    @staticmethod
    def is_guid(text: str | None) -> bool:
        return try_convert(text, uuid.UUID) is not None

    @staticmethod
    def is_date(text: str | None) -> bool:
        return try_convert(text, _dt.datetime) is not None

    @staticmethod
    def is_date_exact(text: str | None, fmt: str) -> bool:
        if not text:
            return False

        try:
            _dt.datetime.strptime(text, fmt)

        except ValueError:
            return False

        return True

    @staticmethod
    def is_ip_address(text: str | None) -> bool:
        if not text:
            return False

        try:
            ipaddress.ip_address(text)

        except ValueError:
            return False

        return True

    # ---------- Documents ----------
    @staticmethod
    def is_json(text: str | None) -> bool:
        """JSON object or array."""
        if not text or text.isspace():
            return False

        trimmed = text.strip()
        if not (
            (trimmed.startswith('{') and trimmed.endswith('}'))
            or (trimmed.startswith('[') and trimmed.endswith(']'))
        ):
            return False

        try:
            json.loads(trimmed)

        except (ValueError, RecursionError):
            return False

        return True

    @staticmethod
    def is_base64(text: str | None) -> bool:
        if not text or text.isspace():
            return False

        trimmed = text.strip()
        if len(trimmed) % 4 != 0:
            return False

        try:
            base64.b64decode(trimmed, validate=True)

        except ValueError:
            return False

        return True

    @staticmethod
    def is_xml(text: str | None) -> bool:
        """Well-formed XML document; any DOCTYPE declaration is rejected."""
        if not text or text.isspace():
            return False

        parser = expat.ParserCreate()
        parser.StartDoctypeDeclHandler = Validators._reject_doctype
        try:
            parser.Parse(text, True)

        except (expat.ExpatError, ValueError):
            return False

        return True

    @staticmethod
    def _reject_doctype(*_: object) -> None:
        raise ValueError('DTD processing is prohibited')

    # ---------- Content Rules ----------
    @staticmethod
    def is_password(
        text: str | None,
        min_length: int = 8,
        *,
        require_special: bool = False,
        require_digit: bool = False,
        require_upper: bool = False,
        require_lower: bool = False,
    ) -> bool:
        if not text or len(text) < min_length:
            return False

        rules = [
            (require_digit, str.isdigit),
            (require_upper, str.isupper),
            (require_lower, str.islower),
            (require_special, lambda ch: not ch.isalnum()),
        ]
        return all(
            any(check(ch) for ch in text) for required, check in rules if required
        )

    @staticmethod
    def is_palindrome(text: str | None) -> bool:
        """Ignores case and every non-alphanumeric character."""
        if not text or text.isspace():
            return False

        folded = [ch.lower() for ch in text if ch.isalnum()]
        return folded == folded[::-1]
