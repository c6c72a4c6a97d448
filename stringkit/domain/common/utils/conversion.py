"""Conversion Utilities Module"""

import datetime as _dt
import decimal
import uuid
from typing import Any

from stringkit.domain.text.conversion import ConversionTarget, try_convert


class ConversionUtils:
    @staticmethod
    def to_int(value: Any, default: int = 0) -> int:
        """Integer value of *value*, truncating floats; *default* on failure."""
        if isinstance(value, bool):
            return int(value)

        if isinstance(value, int | float):
            try:
                return int(value)

            except (OverflowError, ValueError):
                return default

        if isinstance(value, str):
            converted = try_convert(value, int)
            if converted is not None:
                return converted

            number = try_convert(value, float)
            if number is not None:
                return ConversionUtils.to_int(number, default)

        return default

    @staticmethod
    def to_int_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.INT32)

    @staticmethod
    def to_long_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.INT64)

    @staticmethod
    def to_short_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.INT16)

    @staticmethod
    def to_byte_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.UINT8)

    @staticmethod
    def to_sbyte_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.INT8)

    @staticmethod
    def to_ushort_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.UINT16)

    @staticmethod
    def to_uint_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.UINT32)

    @staticmethod
    def to_ulong_or_none(text: str | None) -> int | None:
        return try_convert(text, ConversionTarget.UINT64)

    @staticmethod
    def to_float_or_none(text: str | None) -> float | None:
        return try_convert(text, ConversionTarget.FLOAT)

    @staticmethod
    def to_double_or_none(text: str | None) -> float | None:
        return try_convert(text, ConversionTarget.DOUBLE)

    @staticmethod
    def to_decimal_or_none(text: str | None) -> decimal.Decimal | None:
        return try_convert(text, decimal.Decimal)

    @staticmethod
    def to_bool_or_none(text: str | None) -> bool | None:
        return try_convert(text, bool)

    @staticmethod
    def to_datetime_or_none(text: str | None) -> _dt.datetime | None:
        return try_convert(text, _dt.datetime)

    @staticmethod
    def to_uuid_or_none(text: str | None) -> uuid.UUID | None:
        return try_convert(text, uuid.UUID)

    @staticmethod
    def to_char_or_none(text: str | None) -> str | None:
        return try_convert(text, ConversionTarget.CHAR)
