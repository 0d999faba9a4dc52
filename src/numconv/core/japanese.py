"""
漢数字変換

符号なし64ビット整数を漢数字（位取り形式）に変換する。
- 零〜九 の数字と 十・百・千 の位、万・億・兆 の桁区切りを使用
- 十・百・千 の前の「一」は省略: 10 → 十, 100 → 百, 1000 → 千
- 桁区切りの値がちょうど 1 のときも「一」を省略: 10000 → 万
- 0 の位は出力しない（全体が 0 のときのみ 零）
- 兆を超える部分は兆の前に万・億を重ねて表す:
    10^15 → 千兆, 10^16 → 万兆, 2^64 - 1 → 千八百四十四万六千七百四十四兆…

漢数字 → 整数の変換は未対応。
"""

import logging
from typing import Dict, List, Tuple

from ..config import U64_MAX
from ..errors import OutOfRangeError

logger = logging.getLogger(__name__)

# ==============================================================================
# 変換テーブル
# ==============================================================================

DIGIT_TO_KANJI: Dict[int, str] = {
    0: '零',
    1: '一',
    2: '二',
    3: '三',
    4: '四',
    5: '五',
    6: '六',
    7: '七',
    8: '八',
    9: '九',
}

# 桁区切り内の位（10^3, 10^2, 10^1, 10^0）
SMALL_UNITS: Tuple[Tuple[int, str], ...] = (
    (1000, '千'),
    (100, '百'),
    (10, '十'),
    (1, ''),
)

# 兆未満の桁区切り（下位から）
LARGE_UNITS: Tuple[str, ...] = ('', '万', '億')

CHO = 10 ** 12
CHO_KANJI = '兆'


def _group_to_kanji(group: int) -> str:
    """0 < group < 10000 を漢数字に変換（二千十五 など）"""
    parts: List[str] = []
    for power, unit in SMALL_UNITS:
        digit = group // power % 10
        if digit == 0:
            continue
        if digit == 1 and unit:
            parts.append(unit)
        else:
            parts.append(DIGIT_TO_KANJI[digit] + unit)
    return ''.join(parts)


def _below_cho_to_kanji(value: int) -> str:
    """兆未満（0 <= value < 10^12）を変換。0 は空文字列"""
    parts: List[str] = []
    for unit in LARGE_UNITS:
        value, group = divmod(value, 10000)
        if group == 0:
            continue
        if group == 1 and unit:
            parts.append(unit)
        else:
            parts.append(_group_to_kanji(group) + unit)
    # 下位から処理したので逆順に連結
    return ''.join(reversed(parts))


def to_japanese(value: int) -> str:
    """
    整数を漢数字に変換

    Args:
        value: 0 〜 2^64 - 1 の整数

    Returns:
        漢数字文字列

    Raises:
        OutOfRangeError: value が範囲外

    Examples:
        >>> to_japanese(1994)
        '千九百九十四'
        >>> to_japanese(100000)
        '十万'
    """
    if value < 0 or value > U64_MAX:
        raise OutOfRangeError(value, 0, U64_MAX)

    if value == 0:
        return DIGIT_TO_KANJI[0]

    cho, rest = divmod(value, CHO)
    result = ''
    if cho:
        # 兆の個数は 2^64 / 10^12 未満なので兆未満の変換で足りる
        result = ('' if cho == 1 else _below_cho_to_kanji(cho)) + CHO_KANJI
    result += _below_cho_to_kanji(rest)

    logger.debug(f"{value} -> {result}")
    return result
