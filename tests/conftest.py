"""
共用測試資料

以少量詞條組成的小字典，讓核心測試不依賴 pypinyin 的資料版本。
"""

import pytest

from pinyinkit.dictionary import PinyinDictionary

SAMPLE_SINGLE = {
    "中": "zhōng,zhòng",
    "国": "guó",
    "重": "zhòng,chóng",
    "庆": "qìng",
    "火": "huǒ",
    "锅": "guō",
    "你": "nǐ",
    "好": "hǎo,hào",
    "世": "shì",
    "界": "jiè",
    "智": "zhì",
    "明": "míng",
    "星": "xīng",
    "通": "tōng",
    "啊": "ā,á,ǎ,à,a",
    "行": "xíng,háng",
    "银": "yín",
    "长": "cháng,zhǎng",
    "谢": "xiè",
    "绿": "lǜ,lù",
    "的": "de,dí,dì",
    "〇": "líng",
}

SAMPLE_MULTI = {
    "重庆": "chóng,qìng",
    "银行": "yín,háng",
    "行长": "háng,zhǎng",
    "银行长": "yín,háng,zhǎng",
    "谢谢": "xiè,xie",
    "中国银行": "zhōng,guó,yín,háng",
}

SAMPLE_SIMPLIFIED = {
    "國": "国",
    "銀": "银",
    "長": "长",
    "慶": "庆",
    "鍋": "锅",
    "謝": "谢",
    "綠": "绿",
}


@pytest.fixture
def sample_dictionary() -> PinyinDictionary:
    return PinyinDictionary(
        single=SAMPLE_SINGLE,
        multi=SAMPLE_MULTI,
        simplified=SAMPLE_SIMPLIFIED,
    )
