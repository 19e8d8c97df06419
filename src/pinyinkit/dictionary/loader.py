"""
key=value 字典檔讀寫

檔案格式（UTF-8，一行一筆）:

    # 註解
    中=zhōng,zhòng
    重庆=chóng,qìng

空行與 # 開頭的行會被略過；值為字面 "null" 的行視為無資料。
讀取失敗一律拋 DictionaryLoadError，不回傳半空的表。
"""

from pathlib import Path
from typing import Dict, Mapping, Union

from pinyinkit.exceptions import DictionaryLoadError
from pinyinkit.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

_NULL_VALUE = "null"
_COMMENT_PREFIX = "#"


def parse_line(line: str):
    """
    解析單行

    Returns:
        (key, value) 或 None（空行、註解、null 值）

    Raises:
        ValueError: 缺少 "=" 或 key 為空
    """
    line = line.strip()
    if not line or line.startswith(_COMMENT_PREFIX):
        return None
    key, sep, value = line.partition("=")
    key = key.strip()
    value = value.strip()
    if not sep:
        raise ValueError(f"缺少 '=': {line!r}")
    if not key:
        raise ValueError(f"key 為空: {line!r}")
    if not value or value == _NULL_VALUE:
        return None
    return key, value


def load_table(path: PathLike) -> Dict[str, str]:
    """
    讀取 key=value 字典檔

    Args:
        path: 檔案路徑

    Returns:
        Dict[str, str]: 解析後的表，重複 key 以最後一筆為準

    Raises:
        DictionaryLoadError: 檔案不存在、無法讀取、非 UTF-8 或有格式錯誤的行
    """
    path = Path(path)
    table: Dict[str, str] = {}
    skipped = 0

    try:
        with path.open("r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                try:
                    entry = parse_line(line)
                except ValueError as e:
                    raise DictionaryLoadError(str(e), path=str(path), line_no=line_no) from e
                if entry is None:
                    skipped += 1
                    continue
                key, value = entry
                table[key] = value
    except OSError as e:
        raise DictionaryLoadError(f"無法讀取字典檔: {e.strerror or e}", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"字典檔不是合法的 UTF-8: {e.reason}", path=str(path)) from e

    logger.debug(f"Loaded {len(table)} entries from {path} (skipped {skipped} lines)")
    return table


def write_table(path: PathLike, table: Mapping[str, str]) -> None:
    """
    將表寫成 key=value 檔（依 key 排序），可再以 load_table 讀回

    Raises:
        DictionaryLoadError: key/value 含換行或 key 含 "="，寫出後將無法讀回
    """
    path = Path(path)
    lines = []
    for key in sorted(table):
        value = table[key]
        if "=" in key or "\n" in key or "\n" in value:
            raise DictionaryLoadError(f"無法序列化的詞條: {key!r}={value!r}", path=str(path))
        lines.append(f"{key}={value}\n")

    with path.open("w", encoding="utf-8") as f:
        f.writelines(lines)
    logger.debug(f"Wrote {len(lines)} entries to {path}")
