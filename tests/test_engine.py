"""
測試 PinyinEngine 與模組層級 API
"""

import logging

import pytest

import pinyinkit
from pinyinkit import PinyinConfig, PinyinEngine, PinyinFormat


class TestPinyinEngine:
    @pytest.fixture(autouse=True)
    def _engine(self, sample_dictionary):
        self.engine = PinyinEngine(sample_dictionary)

    def test_is_chinese(self):
        assert self.engine.is_chinese("〇")
        assert not self.engine.is_chinese("A")
        assert self.engine.contains_chinese("abc中")

    def test_normalize_char_and_text(self):
        assert self.engine.normalize_to_simplified("國") == "国"
        assert self.engine.normalize_to_simplified("中國銀行") == "中国银行"

    def test_convert_char(self):
        assert self.engine.convert_char_to_pinyin("行") == ["xíng", "háng"]
        assert self.engine.convert_char_to_pinyin("啊", PinyinFormat.WITHOUT_TONE) == ["a"]
        assert self.engine.convert_char_to_pinyin("我") == []

    def test_convert_default_separator(self):
        assert self.engine.convert_to_pinyin("中国") == "zhōng,guó"
        engine = PinyinEngine(self.engine.dictionary, PinyinConfig(default_separator=" "))
        assert engine.convert_to_pinyin("中国") == "zhōng guó"

    def test_convert_to_list(self):
        assert self.engine.convert_to_pinyin_list("银行", PinyinFormat.WITH_TONE_NUMBER) == ["yin2", "hang2"]

    def test_acronym(self):
        assert self.engine.get_acronym("你好世界") == "nhsj"

    def test_cache_stats(self):
        self.engine.convert_to_pinyin("中国")
        stats = self.engine.get_cache_stats()
        assert stats["dictionary"]["max_phrase_length"] == 4
        assert set(stats["format"]) == {"hits", "misses", "currsize", "maxsize"}

    def test_timing_callback(self, sample_dictionary):
        calls = []
        PinyinEngine(sample_dictionary, on_timing=lambda op, elapsed: calls.append((op, elapsed)))
        assert calls[0][0] == "PinyinEngine.__init__"
        assert calls[0][1] >= 0

    def test_keywords_merge_into_config(self, sample_dictionary):
        calls = []
        config = PinyinConfig(default_separator=" ")
        engine = PinyinEngine(sample_dictionary, config, on_timing=lambda op, elapsed: calls.append(op))

        assert calls == ["PinyinEngine.__init__"]
        assert engine.config.on_timing is not None
        assert engine.convert_to_pinyin("中国") == "zhōng guó"
        assert config.on_timing is None

    def test_verbose_keyword_overrides_config(self, sample_dictionary):
        engine = PinyinEngine(sample_dictionary, PinyinConfig(), verbose=True)
        assert engine.config.verbose

    def test_verbose_logs_initialization(self, sample_dictionary, caplog):
        with caplog.at_level(logging.DEBUG, logger="pinyinkit"):
            PinyinEngine(sample_dictionary, verbose=True)
        assert any("PinyinEngine initialized" in r.getMessage() for r in caplog.records)


class TestPinyinConfig:
    def test_defaults(self):
        config = PinyinConfig()
        assert config.max_phrase_length == 4
        assert config.default_separator == ","

    def test_invalid_phrase_length(self):
        with pytest.raises(ValueError):
            PinyinConfig(max_phrase_length=0)


class TestModuleApi:
    def test_uses_default_engine(self, sample_dictionary):
        pinyinkit.set_default_engine(PinyinEngine(sample_dictionary))
        try:
            assert pinyinkit.convert_to_pinyin("重庆", " ", PinyinFormat.WITHOUT_TONE) == "chong qing"
            assert pinyinkit.get_acronym("重庆") == "cq"
            assert pinyinkit.convert_char_to_pinyin("的", PinyinFormat.WITH_TONE_NUMBER) == ["de5", "di2", "di4"]
            assert pinyinkit.normalize_to_simplified("謝") == "谢"
            assert pinyinkit.convert_to_pinyin_list("谢谢") == ["xiè", "xie"]
        finally:
            pinyinkit.set_default_engine(None)

    def test_pure_functions(self):
        assert pinyinkit.is_chinese("中")
        assert not pinyinkit.contains_chinese("abc")
