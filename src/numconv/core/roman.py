"""
Roman numeral conversion

Convert Roman numerals to Arabic integers and back.
A Roman numeral is rejected when it breaks one of these rules:
- Two subtractions in a row are illegal:
    IXC is not 91 (C - (X - I))
- Four identical numerals in a row are illegal:
    400 is CD (D - C), not CCCC
- Except IIII, the watchmaker's four
- Only I, X, C and M may be repeated:
    LL should be C, DD should be M
- A subtraction that can be written with a single symbol is illegal:
    LC should be L

Unicode numeral glyphs are accepted. Apostrophus symbols (ↀ ↁ ↂ ↇ ↈ) are
decoded on a best-effort basis; vinculum is not supported.
"""

import logging
from enum import Enum
from typing import Dict, List, Tuple, Union

from ..config import ROMAN_MAX, ROMAN_MIN
from ..errors import (
    EmptyInputError,
    InvalidCharacterError,
    InvalidSequenceError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)


class RomanStyle(str, Enum):
    """ローマ数字の出力形式"""
    ASCII = "ascii"      # I V X L C D M
    UNICODE = "unicode"  # Ⅰ Ⅴ Ⅹ Ⅼ Ⅽ Ⅾ Ⅿ


# ==============================================================================
# Symbol tables
# ==============================================================================

ROMAN_TO_ARABIC: Dict[str, int] = {
    'I': 1, 'Ⅰ': 1,
    'Ⅱ': 2,
    'Ⅲ': 3,
    'Ⅳ': 4,
    'V': 5, 'Ⅴ': 5,
    'Ⅵ': 6, 'ↅ': 6,
    'Ⅶ': 7,
    'Ⅷ': 8,
    'Ⅸ': 9,
    'X': 10, 'Ⅹ': 10,
    'Ⅺ': 11,
    'L': 50, 'Ⅼ': 50, 'ↆ': 50,
    'C': 100, 'Ⅽ': 100,
    'D': 500, 'Ⅾ': 500,
    'M': 1000, 'Ⅿ': 1000,
    # apostrophus
    'ↀ': 1000,
    'ↁ': 5000,
    'ↂ': 10000,
    'ↇ': 50000,
    'ↈ': 100000,
}

NUMERALS = frozenset(ROMAN_TO_ARABIC)

# Strictly descending; greedy decomposition relies on this order
ARABIC_TO_ASCII: Tuple[Tuple[int, str], ...] = (
    (1000, 'M'),
    (900, 'CM'),
    (500, 'D'),
    (400, 'CD'),
    (100, 'C'),
    (90, 'XC'),
    (50, 'L'),
    (40, 'XL'),
    (10, 'X'),
    (9, 'IX'),
    (5, 'V'),
    (4, 'IV'),
    (1, 'I'),
)

ARABIC_TO_UNICODE: Tuple[Tuple[int, str], ...] = (
    (1000, 'Ⅿ'),
    (900, 'ⅭⅯ'),
    (500, 'Ⅾ'),
    (400, 'ⅭⅮ'),
    (100, 'Ⅽ'),
    (90, 'ⅩⅭ'),
    (50, 'Ⅼ'),
    (40, 'ⅩⅬ'),
    (10, 'Ⅹ'),
    (9, 'ⅠⅩ'),
    (5, 'Ⅴ'),
    (4, 'ⅠⅤ'),
    (1, 'Ⅰ'),
)

ENCODING_TABLES: Dict[RomanStyle, Tuple[Tuple[int, str], ...]] = {
    RomanStyle.ASCII: ARABIC_TO_ASCII,
    RomanStyle.UNICODE: ARABIC_TO_UNICODE,
}

# Watchmaker's four, accepted as is
WATCHMAKER_FOUR = ('IIII', 'ⅠⅠⅠⅠ')

# Only these may not appear twice in a row
NON_REPEATABLE = (50, 500)


# ==============================================================================
# Encoding
# ==============================================================================

def to_roman(value: int, style: Union[RomanStyle, bool] = RomanStyle.ASCII) -> str:
    """
    整数をローマ数字に変換

    Args:
        value: 1〜3999 の整数
        style: RomanStyle、または use_unicode フラグ（bool）

    Returns:
        ローマ数字文字列

    Raises:
        OutOfRangeError: value が範囲外

    Examples:
        >>> to_roman(1999)
        'MCMXCIX'
        >>> to_roman(1999, RomanStyle.UNICODE)
        'ⅯⅭⅯⅩⅭⅠⅩ'
    """
    if value < ROMAN_MIN or value > ROMAN_MAX:
        raise OutOfRangeError(value, ROMAN_MIN, ROMAN_MAX)

    if isinstance(style, bool):
        style = RomanStyle.UNICODE if style else RomanStyle.ASCII
    table = ENCODING_TABLES[RomanStyle(style)]

    parts: List[str] = []
    remainder = value
    for arabic, roman in table:
        count, remainder = divmod(remainder, arabic)
        parts.append(roman * count)
    return ''.join(parts)


# ==============================================================================
# Decoding
# ==============================================================================

def to_arabic(roman: str) -> int:
    """
    ローマ数字を整数に変換

    大文字・小文字は区別しない。右から左へ走査し、直近4つの値を
    保持するウィンドウで繰り返し・減算の規則違反を検出する。

    Raises:
        EmptyInputError: 空文字列
        InvalidCharacterError: ローマ数字以外の文字を含む
        InvalidSequenceError: 並びが規則に反する

    Examples:
        >>> to_arabic('MCMLXXXIV')
        1984
        >>> to_arabic('iv')
        4
    """
    roman = roman.upper()
    if not roman:
        raise EmptyInputError()

    if roman in WATCHMAKER_FOUR:
        return 4

    invalid = set(roman) - NUMERALS
    if invalid:
        logger.debug(f"Invalid characters in {roman!r}: {sorted(invalid)}")
        raise InvalidCharacterError(invalid)

    # oldest, pre-previous, previous, current
    window = [0, 0, 0, 0]
    value = 0
    for position in range(len(roman) - 1, -1, -1):
        current = ROMAN_TO_ARABIC[roman[position]]
        del window[0]
        window.append(current)

        if current < window[1]:
            # two subtractions in a row
            reason = "double subtraction"
        elif all(item == current for item in window):
            reason = "four identical numerals"
        elif current == window[2] and current in NON_REPEATABLE:
            reason = "repeated L or D"
        elif current < window[2]:
            if window[2] - current == current:
                reason = "redundant subtraction"
            else:
                value -= current
                continue
        else:
            value += current
            continue

        logger.debug(f"Rejected {roman!r} at position {position}: {reason}")
        raise InvalidSequenceError(roman, position)

    return value
