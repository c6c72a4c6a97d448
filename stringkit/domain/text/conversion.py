"""Typed Conversion Module
Parses text into a closed set of target types, returning ``None`` on failure.

Numbers are read in an invariant format: ASCII digits, ``.`` as the decimal
point and ``,`` as an optional group separator.
"""

import datetime as _dt
import decimal
import enum
import string
import struct
import uuid
from collections.abc import Callable
from typing import Any, ClassVar, Protocol, Self, TypeVar, overload, runtime_checkable

T = TypeVar('T')


@runtime_checkable
class Parsable(Protocol):
    """Capability of types that can be built from their string form."""

    @classmethod
    def parse(cls, text: str) -> Self: ...


class ConversionTarget(enum.Enum):
    INT = 'int'
    INT8 = 'int8'
    INT16 = 'int16'
    INT32 = 'int32'
    INT64 = 'int64'
    UINT8 = 'uint8'
    UINT16 = 'uint16'
    UINT32 = 'uint32'
    UINT64 = 'uint64'
    FLOAT = 'float'
    DOUBLE = 'double'
    DECIMAL = 'decimal'
    BOOL = 'bool'
    DATETIME = 'datetime'
    DATE = 'date'
    UUID = 'uuid'
    CHAR = 'char'
    STRING = 'string'


class _Parsers:
    INTEGER_BOUNDS: ClassVar[dict[ConversionTarget, tuple[int, int]]] = {
        ConversionTarget.INT8: (-(2**7), 2**7 - 1),
        ConversionTarget.INT16: (-(2**15), 2**15 - 1),
        ConversionTarget.INT32: (-(2**31), 2**31 - 1),
        ConversionTarget.INT64: (-(2**63), 2**63 - 1),
        ConversionTarget.UINT8: (0, 2**8 - 1),
        ConversionTarget.UINT16: (0, 2**16 - 1),
        ConversionTarget.UINT32: (0, 2**32 - 1),
        ConversionTarget.UINT64: (0, 2**64 - 1),
    }

    DATETIME_FORMATS: ClassVar = [
        '%Y-%m-%d',
        '%Y-%m-%dT%H:%M',
        '%Y-%m-%dT%H:%M:%S',
        '%Y-%m-%d %H:%M:%S',
        '%m/%d/%Y',
        '%m/%d/%Y %H:%M:%S',
    ]

    # 8-4-4-4-12, optionally wrapped in braces or parentheses
    GUID_HYPHENS: ClassVar = (8, 13, 18, 23)
    HEX_DIGITS: ClassVar = frozenset(string.hexdigits)

    @staticmethod
    def integer(text: str, bounds: tuple[int, int] | None = None) -> int | None:
        stripped = text.strip()
        digits = stripped[1:] if stripped[:1] in ('+', '-') else stripped
        if not digits or not (digits.isascii() and digits.isdigit()):
            return None

        # longer than sys.get_int_max_str_digits()
        try:
            value = int(stripped)

        except ValueError:
            return None

        if bounds and not bounds[0] <= value <= bounds[1]:
            return None
        return value

    @staticmethod
    def _numeric_text(text: str) -> str | None:
        stripped = text.strip().replace(',', '')
        if not stripped or not stripped.isascii() or '_' in stripped:
            return None
        return stripped

    @staticmethod
    def double(text: str) -> float | None:
        numeric = _Parsers._numeric_text(text)
        if numeric is None:
            return None

        try:
            return float(numeric)

        except ValueError:
            return None

    @staticmethod
    def single(text: str) -> float | None:
        value = _Parsers.double(text)
        if value is None:
            return None

        try:
            return struct.unpack('<f', struct.pack('<f', value))[0]

        except OverflowError:
            return None

    @staticmethod
    def fixed_point(text: str) -> decimal.Decimal | None:
        numeric = _Parsers._numeric_text(text)
        if numeric is None:
            return None

        try:
            value = decimal.Decimal(numeric)

        except decimal.InvalidOperation:
            return None

        return value if value.is_finite() else None

    @staticmethod
    def boolean(text: str) -> bool | None:
        return {'true': True, 'false': False}.get(text.strip().lower())

    @staticmethod
    def timestamp(text: str) -> _dt.datetime | None:
        stripped = text.strip()
        try:
            return _dt.datetime.fromisoformat(stripped)

        except ValueError:
            pass

        for fmt in _Parsers.DATETIME_FORMATS:
            try:
                return _dt.datetime.strptime(stripped, fmt)

            except ValueError:
                continue

        return None

    @staticmethod
    def calendar_date(text: str) -> _dt.date | None:
        value = _Parsers.timestamp(text)
        return value.date() if value else None

    @staticmethod
    def _guid_hex(text: str) -> str | None:
        if text[:1] + text[-1:] in ('{}', '()'):
            text = text[1:-1]

        if len(text) == 36:
            if any(text[i] != '-' for i in _Parsers.GUID_HYPHENS):
                return None
            text = text.replace('-', '', 4)

        if len(text) != 32 or not all(ch in _Parsers.HEX_DIGITS for ch in text):
            return None
        return text

    @staticmethod
    def identifier(text: str) -> uuid.UUID | None:
        hex_digits = _Parsers._guid_hex(text.strip())
        return uuid.UUID(hex_digits) if hex_digits else None

    @staticmethod
    def char(text: str) -> str | None:
        return text if len(text) == 1 else None


def _integer_parser(target: ConversionTarget) -> Callable[[str], int | None]:
    bounds = _Parsers.INTEGER_BOUNDS[target]
    return lambda text: _Parsers.integer(text, bounds)


PARSERS: dict[ConversionTarget, Callable[[str], Any]] = {
    ConversionTarget.INT: _Parsers.integer,
    **{target: _integer_parser(target) for target in _Parsers.INTEGER_BOUNDS},
    ConversionTarget.FLOAT: _Parsers.single,
    ConversionTarget.DOUBLE: _Parsers.double,
    ConversionTarget.DECIMAL: _Parsers.fixed_point,
    ConversionTarget.BOOL: _Parsers.boolean,
    ConversionTarget.DATETIME: _Parsers.timestamp,
    ConversionTarget.DATE: _Parsers.calendar_date,
    ConversionTarget.UUID: _Parsers.identifier,
    ConversionTarget.CHAR: _Parsers.char,
    ConversionTarget.STRING: str,
}

TYPE_TARGETS: dict[type, ConversionTarget] = {
    int: ConversionTarget.INT,
    float: ConversionTarget.DOUBLE,
    decimal.Decimal: ConversionTarget.DECIMAL,
    bool: ConversionTarget.BOOL,
    _dt.datetime: ConversionTarget.DATETIME,
    _dt.date: ConversionTarget.DATE,
    uuid.UUID: ConversionTarget.UUID,
    str: ConversionTarget.STRING,
}


def _parse_enum(text: str, target: type[enum.Enum]) -> enum.Enum | None:
    wanted = text.strip().lower()
    for name, member in target.__members__.items():
        if name.lower() == wanted:
            return member
    return None


# noinspection PyBroadException
def _parse_delegate(text: str, target: type[Parsable]) -> Any | None:
    try:
        return target.parse(text)

    except Exception:
        return None


@overload
def try_convert(text: str | None, target: type[T]) -> T | None: ...


@overload
def try_convert(text: str | None, target: ConversionTarget) -> Any | None: ...


def try_convert(text: str | None, target: Any) -> Any | None:
    """Interpret *text* as *target*, or return ``None``.

    *target* is a ``ConversionTarget`` tag, one of the builtin types in
    ``TYPE_TARGETS``, an ``Enum`` subclass (matched case-insensitively by
    member name) or a ``Parsable`` class. Blank input and unsupported
    targets always yield ``None``.
    """
    if not text or text.isspace():
        return None

    if isinstance(target, ConversionTarget):
        return PARSERS[target](text)

    if not isinstance(target, type):
        return None

    if target in TYPE_TARGETS:
        return PARSERS[TYPE_TARGETS[target]](text)

    if issubclass(target, enum.Enum):
        return _parse_enum(text, target)

    if isinstance(target, Parsable):
        return _parse_delegate(text, target)

    return None
