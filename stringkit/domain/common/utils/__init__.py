from .conversion import ConversionUtils
from .sanitization import DataSanitizer
from .string import StringUtils
from .validation import Validators

__all__ = [
    'ConversionUtils',
    'DataSanitizer',
    'StringUtils',
    'Validators',
]
