"""Unit tests for the Validators helpers."""

import pytest
from loguru import logger

from stringkit.domain.common.utils import Validators


@pytest.fixture
def warnings(library_logging):
    records: list[str] = []
    handler_id = logger.add(
        lambda message: records.append(message.record), level='WARNING'
    )
    yield records
    logger.remove(handler_id)


# ============================================================================
#                               Pattern formats
# ============================================================================


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('user@example.com', True),
        ('First.Last+tag@sub.example.org', True),
        ('no-at-sign.example.com', False),
        ('two@@example.com', False),
        ('spaces in@example.com', False),
        ('user@localhost', False),
        ('', False),
        (None, False),
    ],
)
def test_is_email(text, expected):
    assert Validators.is_email(text) is expected


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('https://example.com', True),
        ('http://example.com/path?q=1#frag', True),
        ('HTTPS://EXAMPLE.COM', True),
        ('ftp://example.com', False),
        ('example.com', False),
        ('http://', False),
        ('http://exa mple.com', False),
        ('http://[abc', False),
        ('https://[::1', False),
        ('   ', False),
    ],
)
def test_is_url(text, expected):
    assert Validators.is_url(text) is expected


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('#fff', True),
        ('#A1B2C3', True),
        ('fff', False),
        ('#ffff', False),
        ('#ggg', False),
        ('', False),
    ],
)
def test_is_hex_color(text, expected):
    assert Validators.is_hex_color(text) is expected


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('+14155552671', True),
        ('4155552671', True),
        ('123456', False),
        ('+1 415 555 2671', False),
        ('1234567890123456', False),
    ],
)
def test_is_phone(text, expected):
    assert Validators.is_phone(text) is expected


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('john_doe', True),
        ('jane.doe-99', True),
        ('ab', False),
        ('a' * 21, False),
        ('bad name', False),
        ('bad!name', False),
    ],
)
def test_is_username(text, expected):
    assert Validators.is_username(text) is expected


def test_is_username_custom_bounds():
    assert Validators.is_username('ab', min_length=2) is True
    assert Validators.is_username('abcdef', max_length=5) is False


def test_pattern_timeouts_fail_and_are_logged(expired_container, warnings):
    assert Validators.is_email('user@example.com') is False

    assert len(warnings) == 1
    assert warnings[0]['extra']['pattern'] == 'email'
    assert warnings[0]['extra']['length'] == len('user@example.com')


def test_matches_regex_and_extract_matches():
    assert Validators.matches_regex('abc123', r'\d{3}') is True
    assert Validators.matches_regex('abc', r'\d') is False
    assert Validators.matches_regex('', r'.*') is False
    assert Validators.extract_matches('a1b22', r'\d+') == ['1', '22']
    assert Validators.extract_matches('abc', '(') == []


def test_custom_pattern_timeouts_are_logged(expired_container, warnings):
    assert Validators.extract_matches('abc', r'b') == []
    assert warnings[0]['extra']['pattern'] == 'custom'


# ============================================================================
#                               Checksums & identifiers
# ============================================================================


def test_is_credit_card():
    assert Validators.is_credit_card('4111 1111 1111 1111') is True
    assert Validators.is_credit_card('4111 1111 1111 1112') is False


def test_is_guid():
    assert Validators.is_guid('12345678-1234-5678-1234-567812345678') is True
    assert Validators.is_guid('12345678') is False
    assert Validators.is_guid('1234567_123456781234567812345678') is False


def test_is_date():
    assert Validators.is_date('2024-02-29') is True
    assert Validators.is_date('2023-02-29') is False


def test_is_date_exact():
    assert Validators.is_date_exact('01.03.2024', '%d.%m.%Y') is True
    assert Validators.is_date_exact('2024-03-01', '%d.%m.%Y') is False
    assert Validators.is_date_exact(None, '%d.%m.%Y') is False


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('192.168.0.1', True),
        ('::1', True),
        ('2001:db8::ff00:42:8329', True),
        ('256.0.0.1', False),
        ('localhost', False),
        ('', False),
    ],
)
def test_is_ip_address(text, expected):
    assert Validators.is_ip_address(text) is expected


# ============================================================================
#                               Documents
# ============================================================================


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('{"a": 1}', True),
        ('  [1, 2, 3]  ', True),
        ('{"a": }', False),
        ('"just a string"', False),
        ('42', False),
        ('', False),
    ],
)
def test_is_json(text, expected):
    assert Validators.is_json(text) is expected


def test_is_json_rejects_deep_nesting():
    assert Validators.is_json('[' * 100_000 + ']' * 100_000) is False


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('aGVsbG8=', True),
        ('aGVsbG8gd29ybGQ=', True),
        ('aGVsbG8', False),
        ('a$VsbG8=', False),
        ('ééé=', False),
        ('', False),
    ],
)
def test_is_base64(text, expected):
    assert Validators.is_base64(text) is expected


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('<root><item id="1">text</item></root>', True),
        ('<?xml version="1.0"?>\n<note/>', True),
        ('<root><item></root>', False),
        ('<a/><b/>', False),
        ('plain text', False),
        ('<!DOCTYPE note [<!ENTITY x "boom">]><note>&x;</note>', False),
        ('<!DOCTYPE html><html/>', False),
        ('   ', False),
        (None, False),
    ],
)
def test_is_xml(text, expected):
    assert Validators.is_xml(text) is expected


# ============================================================================
#                               Content rules
# ============================================================================


def test_is_password_length():
    assert Validators.is_password('12345678') is True
    assert Validators.is_password('1234567') is False
    assert Validators.is_password(None) is False


def test_is_password_requirements():
    rules = {
        'require_special': True,
        'require_digit': True,
        'require_upper': True,
        'require_lower': True,
    }
    assert Validators.is_password('Secr3t!pass', **rules) is True
    assert Validators.is_password('secr3t!pass', **rules) is False
    assert Validators.is_password('SECR3T!PASS', **rules) is False
    assert Validators.is_password('Secret!pass', **rules) is False
    assert Validators.is_password('Secr3tpass', **rules) is False


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('A man, a plan, a canal: Panama', True),
        ('racecar', True),
        ('hello', False),
        ('', False),
        ('   ', False),
    ],
)
def test_is_palindrome(text, expected):
    assert Validators.is_palindrome(text) is expected
