"""
例外類別

轉換核心本身不拋例外（查無資料一律降級為原字輸出或空列表），
例外只出現在字典載入階段：寧可啟動時失敗，也不要默默得到空字典。
"""

from typing import Optional


class PinyinkitError(Exception):
    """pinyinkit 所有例外的基底類別"""


class DictionaryLoadError(PinyinkitError):
    """
    字典資料無法讀取或格式錯誤

    Attributes:
        path: 出錯的檔案路徑（若有）
        line_no: 出錯的行號，從 1 起算（若有）
    """

    def __init__(self, message: str, path: Optional[str] = None, line_no: Optional[int] = None):
        self.path = path
        self.line_no = line_no
        location = ""
        if path is not None:
            location = f" ({path}" + (f":{line_no}" if line_no is not None else "") + ")"
        super().__init__(f"{message}{location}")
