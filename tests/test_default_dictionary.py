"""
以 pypinyin / hanziconv 實際資料做整合測試

這些測試會建置完整的預設字典（數秒），缺少依賴時略過。
"""

import pytest

pytest.importorskip("pypinyin")
pytest.importorskip("hanziconv")

import pinyinkit  # noqa: E402
from pinyinkit import PinyinFormat  # noqa: E402
from pinyinkit.dictionary import get_default_dictionary, get_dictionary_backend  # noqa: E402
from pinyinkit.dictionary.builder import build_multi_table, build_simplified_table  # noqa: E402


@pytest.fixture(scope="module")
def engine():
    return pinyinkit.get_default_engine()


class TestDefaultEngine:
    def test_acronym(self, engine):
        assert engine.get_acronym("你好世界") == "nhsj"
        assert engine.get_acronym("智明星通") == "zmxt"

    def test_tone_number(self, engine):
        assert engine.convert_to_pinyin("中国", ",", PinyinFormat.WITH_TONE_NUMBER) == "zhong1,guo2"

    def test_traditional_input(self, engine):
        assert engine.convert_to_pinyin("中國", ",", PinyinFormat.WITH_TONE_NUMBER) == "zhong1,guo2"

    def test_heteronym_char_deduped(self, engine):
        readings = engine.convert_char_to_pinyin("啊", PinyinFormat.WITHOUT_TONE)
        assert "a" in readings
        assert len(readings) == len(set(readings))

    def test_heteronym_phrase(self, engine):
        assert engine.convert_to_pinyin("银行", " ", PinyinFormat.WITHOUT_TONE) == "yin hang"

    def test_non_chinese_unchanged(self, engine):
        text = "pinyinkit 0.1.0 (beta)"
        assert engine.convert_to_pinyin(text) == text

    def test_normalization_idempotent(self, engine):
        once = engine.normalize_to_simplified("臺灣的銀行與學習")
        assert engine.normalize_to_simplified(once) == once

    def test_acronym_length(self, engine):
        text = "我在北京的銀行工作, since 2〇2〇!"
        assert len(engine.get_acronym(text)) == len(text)


class TestBuilder:
    def test_default_window(self):
        dictionary = get_default_dictionary()
        assert dictionary.max_phrase_length <= 4
        assert get_dictionary_backend().get_stats()["initialized"]

    def test_multi_table_respects_max_length(self):
        table = build_multi_table(max_phrase_length=2)
        assert table
        assert all(len(word) == 2 for word in table)

    def test_simplified_table(self):
        table = build_simplified_table()
        assert table["國"] == "国"
        assert "国" not in table
