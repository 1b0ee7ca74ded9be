from typing import List, Optional, Tuple

from .config import PinyinFormat
from .dictionary import PinyinDictionary, is_chinese_character
from .logging import get_engine_logger
from .tone import format_pinyin
from .trie import Segment, WordTrie

logger = get_engine_logger()


class PinyinConverter:
    """
    汉字转拼音

    核心思路：多音词整体注音，其余逐字注音
    - 前缀树正向最大匹配切分
    - 命中多音词查词典，否则取单字的第一个读音
    - 构建后只读，可被多个线程同时调用
    """

    def __init__(self, dictionary: PinyinDictionary, trie: Optional[WordTrie] = None):
        self.dictionary = dictionary
        self.trie = trie if trie is not None else WordTrie(dictionary.word_pinyins.keys())

        logger.debug(
            f"转换器就绪: {dictionary.char_count} 个单字, "
            f"{dictionary.word_count} 个多音词, 前缀树 {len(self.trie)} 个词条"
        )

    def convert_character(
        self,
        c: str,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> List[str]:
        """
        单个汉字转拼音

        Args:
            c: 单个汉字
            pinyin_format: 拼音格式

        Returns:
            去重后的候选拼音，按词典顺序；无数据返回空列表
        """
        if len(c) != 1:
            raise ValueError(f"只接受单个字符: {c!r}")

        pinyin = self.dictionary.get_char_pinyin(c)
        if pinyin is None:
            return []

        # 格式化后可能出现重复（如 mā、má 去调后都是 ma）
        return list(dict.fromkeys(format_pinyin(pinyin, pinyin_format)))

    def convert_segments(
        self,
        statement: str,
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> List[Tuple[Segment, List[str]]]:
        """切分并注音，返回每个片段及其拼音列表"""
        return [
            (segment, self._convert_segment(segment, pinyin_format))
            for segment in self.trie.segment(statement)
        ]

    def convert_statement(
        self,
        statement: str,
        separator: str = " ",
        pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
    ) -> str:
        """
        字符串转拼音

        片段内的拼音用 separator 连接，片段之间直接拼接。

        Args:
            statement: 含汉字的字符串
            separator: 拼音分隔符
            pinyin_format: 拼音格式

        Returns:
            拼音字符串
        """
        return ''.join(
            separator.join(pieces)
            for _, pieces in self.convert_segments(statement, pinyin_format)
        )

    def is_multi_pinyin(self, c: str) -> bool:
        """是否为多音字"""
        return len(self.convert_character(c)) > 1

    def _convert_segment(self, segment: Segment, pinyin_format: PinyinFormat) -> List[str]:
        if segment.matched:
            return self._convert_word(segment.text, pinyin_format)

        pieces = []
        for c in segment.text:
            if not is_chinese_character(c):
                pieces.append(c)
                continue
            candidates = self.convert_character(c, pinyin_format)
            pieces.append(candidates[0] if candidates else c)
        return pieces

    def _convert_word(self, word: str, pinyin_format: PinyinFormat) -> List[str]:
        pinyin = self.dictionary.get_word_pinyin(word)
        if pinyin is None:
            # 前缀树与词典不一致，原样返回
            logger.warning(f"多音词词典中找不到: {word!r}")
            return [word]
        return format_pinyin(pinyin, pinyin_format) or [word]
