"""
numconv ユーティリティモジュール
"""

from .patterns import ARABIC_PATTERN, parse_arabic

__all__ = [
    'ARABIC_PATTERN',
    'parse_arabic',
]
