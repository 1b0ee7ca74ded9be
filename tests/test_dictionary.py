"""
词典加载测试
"""
import logging
import tempfile
import unittest
from pathlib import Path

import orjson

from hanpin.engine.dictionary import (
    DEFAULT_DICT_DIR,
    NO_PINYIN,
    PinyinDictionary,
    contains_chinese,
    is_chinese_character,
    load_default_dictionary,
)
from hanpin.engine.errors import DictionaryFormatError


class TestChineseCharacter(unittest.TestCase):
    """汉字判断"""

    def test_is_chinese_character(self):
        for c in "中国人〇一龥":
            self.assertTrue(is_chinese_character(c), c)
        for c in "a1 ,。！ā":
            self.assertFalse(is_chinese_character(c), c)

    def test_contains_chinese(self):
        self.assertTrue(contains_chinese("hello 世界"))
        self.assertFalse(contains_chinese("hello, world"))
        self.assertFalse(contains_chinese(""))


class TestPinyinDictionary(unittest.TestCase):
    """内存词典"""

    def test_dedup_keeps_order(self):
        pdict = PinyinDictionary({"吗": "ma, má,ma,mǎ"}, {})
        self.assertEqual(pdict.get_char_pinyin("吗"), "ma,má,mǎ")

    def test_null_sentinel(self):
        pdict = PinyinDictionary({"㐀": NO_PINYIN}, {"重庆": NO_PINYIN})
        self.assertIsNone(pdict.get_char_pinyin("㐀"))
        self.assertIsNone(pdict.get_word_pinyin("重庆"))
        # 占位词条仍然计入词典
        self.assertEqual(pdict.char_count, 1)
        self.assertIn("重庆", pdict.word_pinyins)

    def test_missing(self):
        pdict = PinyinDictionary()
        self.assertIsNone(pdict.get_char_pinyin("中"))
        self.assertIsNone(pdict.get_word_pinyin("中国"))
        self.assertEqual(pdict.char_count, 0)
        self.assertEqual(pdict.word_count, 0)

    def test_short_words_skipped(self):
        pdict = PinyinDictionary({}, {"重": "zhòng", "重庆": "chóng,qìng"})
        self.assertEqual(list(pdict.word_pinyins), ["重庆"])

    def test_word_pinyin_not_deduplicated(self):
        pdict = PinyinDictionary({}, {"天天": "tiān,tiān"})
        self.assertEqual(pdict.get_word_pinyin("天天"), "tiān,tiān")

    def test_empty_syllable_count_mismatch_warns(self):
        with self.assertLogs('hanpin.engine', level=logging.WARNING) as cm:
            pdict = PinyinDictionary({}, {"重庆人": "chóng,,qìng"})
        self.assertIn("重庆人", cm.output[0])
        self.assertEqual(pdict.get_word_pinyin("重庆人"), "chóng,,qìng")

    def test_read_only(self):
        pdict = PinyinDictionary({"中": "zhōng"}, {})
        with self.assertRaises(TypeError):
            pdict.char_pinyins["国"] = "guó"


class TestDictionaryLoading(unittest.TestCase):
    """从文件加载"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dict_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write_json(self, name, data):
        (self.dict_dir / name).write_bytes(orjson.dumps(data))

    def test_load_json(self):
        self._write_json("char_dict.json", {"重": "zhòng,chóng", "庆": "qìng"})
        self._write_json("word_dict.json", {"重庆": "chóng,qìng"})
        pdict = PinyinDictionary.load(self.dict_dir)
        self.assertEqual(pdict.char_count, 2)
        self.assertEqual(pdict.word_count, 1)
        self.assertEqual(pdict.get_word_pinyin("重庆"), "chóng,qìng")

    def test_load_text(self):
        (self.dict_dir / "char_dict.txt").write_text(
            "# 单字\n重=zhòng,chóng\n\n庆=qìng\n", encoding="utf-8"
        )
        (self.dict_dir / "word_dict.txt").write_text("重庆=chóng,qìng\n", encoding="utf-8")
        pdict = PinyinDictionary.load(str(self.dict_dir))
        self.assertEqual(pdict.get_char_pinyin("重"), "zhòng,chóng")
        self.assertEqual(pdict.get_word_pinyin("重庆"), "chóng,qìng")

    def test_json_preferred_over_text(self):
        self._write_json("char_dict.json", {"中": "zhōng"})
        (self.dict_dir / "char_dict.txt").write_text("中=zhòng\n", encoding="utf-8")
        pdict = PinyinDictionary.load(self.dict_dir)
        self.assertEqual(pdict.get_char_pinyin("中"), "zhōng")

    def test_missing_files(self):
        pdict = PinyinDictionary.load(self.dict_dir)
        self.assertEqual(pdict.char_count, 0)
        self.assertEqual(pdict.word_count, 0)

    def test_malformed_json(self):
        (self.dict_dir / "char_dict.json").write_bytes(b"{not json")
        with self.assertRaises(DictionaryFormatError):
            PinyinDictionary.load(self.dict_dir)

    def test_non_object_json(self):
        self._write_json("word_dict.json", ["重庆"])
        with self.assertRaises(DictionaryFormatError):
            PinyinDictionary.load(self.dict_dir)

    def test_non_string_value(self):
        self._write_json("char_dict.json", {"中": ["zhōng"]})
        with self.assertRaises(DictionaryFormatError):
            PinyinDictionary.load(self.dict_dir)

    def test_text_line_without_separator(self):
        (self.dict_dir / "char_dict.txt").write_text("中 zhōng\n", encoding="utf-8")
        with self.assertRaises(DictionaryFormatError) as ctx:
            PinyinDictionary.load(self.dict_dir)
        self.assertIn("第 1 行", str(ctx.exception))


class TestDefaultDictionary(unittest.TestCase):
    """包内自带词典"""

    @classmethod
    def setUpClass(cls):
        cls.pdict = load_default_dictionary()

    def test_bundled_files_exist(self):
        self.assertTrue((DEFAULT_DICT_DIR / "char_dict.json").exists())
        self.assertTrue((DEFAULT_DICT_DIR / "word_dict.json").exists())

    def test_loaded(self):
        self.assertGreater(self.pdict.char_count, 50)
        self.assertGreater(self.pdict.word_count, 20)

    def test_words_have_one_syllable_per_char(self):
        for word, pinyin in self.pdict.word_pinyins.items():
            self.assertGreaterEqual(len(word), 2)
            self.assertEqual(len(pinyin.split(",")), len(word), word)


if __name__ == '__main__':
    unittest.main()
