from .log import LogConfiguration
from .patterns import PatternConfiguration

__all__ = [
    'LogConfiguration',
    'PatternConfiguration',
]
