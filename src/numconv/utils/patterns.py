"""
入力判定パターン

CLI やバッチ処理で受け取った文字列が算用数字（符号なし64ビット整数）
かどうかを判定する薄いユーティリティ。
"""

import re
from typing import Optional

from ..config import U64_MAX

# 算用数字パターン
# 先頭の '+' は許容、空白・小数点・負号は不可
ARABIC_PATTERN = re.compile(r'\+?[0-9]+')


def parse_arabic(text: str) -> Optional[int]:
    """
    算用数字として解釈できれば整数を返す

    64ビットに収まらない数字列は算用数字とみなさない（None）。
    呼び出し側はその場合ローマ数字として扱う。

    Examples:
        >>> parse_arabic('1984')
        1984
        >>> parse_arabic('+7')
        7
        >>> parse_arabic('XIV') is None
        True
    """
    if not ARABIC_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > U64_MAX:
        return None
    return value
