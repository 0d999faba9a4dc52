"""
numconv: ローマ数字・漢数字 ⇔ 算用数字 変換
"""

from .core.roman import RomanStyle, to_arabic, to_roman
from .core.japanese import to_japanese
from .errors import (
    NumeralError,
    EmptyInputError,
    InvalidCharacterError,
    InvalidSequenceError,
    OutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    # roman
    'RomanStyle',
    'to_arabic',
    'to_roman',
    # japanese
    'to_japanese',
    # errors
    'NumeralError',
    'EmptyInputError',
    'InvalidCharacterError',
    'InvalidSequenceError',
    'OutOfRangeError',
]
