"""
漢字判斷

只認 CJK 統一表意文字基本區 (U+4E00 - U+9FA5) 與「〇」(U+3007)。
"""

CHINESE_LING = "\u3007"  # 〇

CJK_START = 0x4E00
CJK_END = 0x9FA5


def is_chinese(char: str) -> bool:
    """
    判斷單一字元是否為漢字（含〇）

    Args:
        char: 單個字元；空字串或多字元字串一律回傳 False

    Returns:
        bool: 是否為漢字
    """
    if len(char) != 1:
        return False
    return char == CHINESE_LING or CJK_START <= ord(char) <= CJK_END


def contains_chinese(text: str) -> bool:
    """字串中是否含有任何漢字"""
    return any(is_chinese(char) for char in text)
