"""
測試字串轉拼音與拼音首字母
"""

import pytest

from pinyinkit.core.converter import PinyinConverter
from pinyinkit.core.tone import PinyinFormat

ALL_FORMATS = list(PinyinFormat)


class TestConvert:
    @pytest.fixture(autouse=True)
    def _converter(self, sample_dictionary):
        self.converter = PinyinConverter(sample_dictionary)

    def test_tone_number(self):
        assert self.converter.convert("中国", ",", PinyinFormat.WITH_TONE_NUMBER) == "zhong1,guo2"

    def test_default_tone_mark(self):
        assert self.converter.convert("你好世界") == "nǐ,hǎo,shì,jiè"

    def test_heteronym_phrase(self):
        assert self.converter.convert("重庆火锅", " ", PinyinFormat.WITH_TONE_NUMBER) == "chong2 qing4 huo3 guo1"

    def test_four_char_phrase_after_normalization(self):
        assert self.converter.convert("中國銀行", " ") == "zhōng guó yín háng"

    def test_phrase_without_tone_keeps_all_syllables(self):
        assert self.converter.convert("谢谢", ",", PinyinFormat.WITHOUT_TONE) == "xie,xie"

    @pytest.mark.parametrize("pinyin_format", ALL_FORMATS)
    def test_non_chinese_unchanged(self, pinyin_format):
        text = "Hello, world! 123 #@"
        assert self.converter.convert(text, "-", pinyin_format) == text

    def test_empty(self):
        assert self.converter.convert("") == ""

    def test_mixed_boundaries(self):
        assert self.converter.convert("a中b", "-", PinyinFormat.WITHOUT_TONE) == "a-zhong-b"
        assert self.converter.convert("abc中国", " ", PinyinFormat.WITHOUT_TONE) == "abc zhong guo"

    def test_no_trailing_separator(self):
        assert self.converter.convert("中国", ",").endswith("guó")
        assert self.converter.convert("中国!", ",") == "zhōng,guó,!"

    def test_missing_char_passes_through(self):
        assert self.converter.convert("我爱abc", ",") == "我,爱,abc"

    def test_chinese_ling(self):
        assert self.converter.convert("二〇", ",", PinyinFormat.WITH_TONE_NUMBER) == "二,ling2"
        assert self.converter.convert("x〇", ",") == "x,líng"


class TestConvertToList:
    def test_list(self, sample_dictionary):
        converter = PinyinConverter(sample_dictionary)
        result = converter.convert_to_list("我有3个重庆火锅!", PinyinFormat.WITHOUT_TONE)
        assert result == ["我", "有", "3", "个", "chong", "qing", "huo", "guo", "!"]

    def test_list_literal_runs(self, sample_dictionary):
        converter = PinyinConverter(sample_dictionary)
        assert converter.convert_to_list("ab中cd") == ["ab", "zhōng", "cd"]
        assert converter.convert_to_list("") == []


class TestAcronym:
    @pytest.fixture(autouse=True)
    def _converter(self, sample_dictionary):
        self.converter = PinyinConverter(sample_dictionary)

    def test_examples(self):
        assert self.converter.acronym("你好世界") == "nhsj"
        assert self.converter.acronym("智明星通") == "zmxt"

    def test_uses_phrase_reading(self):
        assert self.converter.acronym("重庆") == "cq"
        assert self.converter.acronym("重") == "z"

    def test_repeated_phrase_syllables(self):
        assert self.converter.acronym("谢谢") == "xx"

    def test_mixed_text(self):
        assert self.converter.acronym("重庆abc銀行") == "cqabcyh"

    def test_missing_char_kept(self):
        assert self.converter.acronym("我的") == "我d"

    @pytest.mark.parametrize("text", ["", "abc", "你好世界", "中國銀行 ATM", "我爱〇〇", "谢谢!谢谢"])
    def test_length_preserved(self, text):
        assert len(self.converter.acronym(text)) == len(text)
