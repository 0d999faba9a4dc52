from .roman import RomanStyle, to_arabic, to_roman
from .japanese import to_japanese

__all__ = [
    'RomanStyle',
    'to_arabic',
    'to_roman',
    'to_japanese',
]
