"""
拼音词典模块

加载两份只读数据：
- 单字词典：汉字 → 候选拼音（带声调符号，逗号分隔）
- 多音词词典：词 → 标准读音（每字一个音节，逗号分隔）

支持 JSON（orjson 解析）和 `键=值` 文本两种格式。
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

import orjson

from .errors import DictionaryFormatError
from .logging import get_engine_logger, log_execution_time
from .tone import PINYIN_SEPARATOR, split_pinyin
from .trie import MIN_WORD_LENGTH

logger = get_engine_logger()

# 包内自带词典目录
DEFAULT_DICT_DIR = Path(__file__).resolve().parent.parent / 'data'

CHAR_DICT_NAME = 'char_dict'
WORD_DICT_NAME = 'word_dict'

# 词典中表示“无拼音”的占位值
NO_PINYIN = "null"

# 〇 不在基本汉字区但按汉字处理
CHINESE_LING = '〇'


def is_chinese_character(c: str) -> bool:
    """判断单个字符是否为汉字"""
    return c == CHINESE_LING or '\u4e00' <= c <= '\u9fff'


def contains_chinese(text: str) -> bool:
    """判断字符串中是否含有汉字"""
    return any(is_chinese_character(c) for c in text)


def _normalize_pinyin(pinyin: str) -> str:
    """去掉空白、重复音节（保持首次出现顺序）"""
    if pinyin.strip() == NO_PINYIN:
        return NO_PINYIN
    return PINYIN_SEPARATOR.join(dict.fromkeys(split_pinyin(pinyin)))


def _read_json(path: Path) -> dict:
    with open(path, 'rb') as f:
        try:
            data = orjson.loads(f.read())
        except orjson.JSONDecodeError as e:
            raise DictionaryFormatError(path, str(e)) from e
    if not isinstance(data, dict):
        raise DictionaryFormatError(path, "顶层必须是对象")
    return data


def _read_text(path: Path) -> dict:
    """读取 `键=值` 格式文本，# 开头为注释"""
    data = {}
    with open(path, 'r', encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            key, sep, value = line.partition('=')
            if not sep:
                raise DictionaryFormatError(path, f"第 {lineno} 行缺少 '='")
            data[key.strip()] = value.strip()
    return data


def _load_mapping(dict_dir: Path, name: str) -> Dict[str, str]:
    """按 name.json → name.txt 的顺序查找并加载词典文件"""
    for suffix, reader in (('.json', _read_json), ('.txt', _read_text)):
        path = dict_dir / f'{name}{suffix}'
        if not path.exists():
            continue
        data = reader(path)
        for key, value in data.items():
            if not isinstance(value, str):
                raise DictionaryFormatError(path, f"{key!r} 的拼音必须是字符串")
        logger.debug(f"已加载 {path} ({len(data)} 条)")
        return data

    logger.warning(f"词典文件不存在: {dict_dir / name}.json")
    return {}


class PinyinDictionary:
    """只读拼音词典"""

    def __init__(
        self,
        char_pinyins: Optional[Mapping[str, str]] = None,
        word_pinyins: Optional[Mapping[str, str]] = None,
    ):
        chars = {}
        for char, pinyin in (char_pinyins or {}).items():
            chars[char] = _normalize_pinyin(pinyin)

        words = {}
        for word, pinyin in (word_pinyins or {}).items():
            if len(word) < MIN_WORD_LENGTH:
                logger.warning(f"跳过多音词词条（少于 {MIN_WORD_LENGTH} 字）: {word!r}")
                continue
            pinyin = pinyin.strip()
            if pinyin != NO_PINYIN and len(split_pinyin(pinyin)) != len(word):
                logger.warning(f"音节数与字数不一致: {word}={pinyin}")
            words[word] = pinyin

        self._char_pinyins = MappingProxyType(chars)
        self._word_pinyins = MappingProxyType(words)

    @classmethod
    @log_execution_time(get_engine_logger())
    def load(cls, dict_dir: Union[str, os.PathLike, None] = None) -> "PinyinDictionary":
        """
        从目录加载词典

        Args:
            dict_dir: 词典目录，None 表示包内自带数据

        Returns:
            PinyinDictionary 实例
        """
        dict_dir = Path(dict_dir) if dict_dir is not None else DEFAULT_DICT_DIR
        pdict = cls(
            _load_mapping(dict_dir, CHAR_DICT_NAME),
            _load_mapping(dict_dir, WORD_DICT_NAME),
        )
        logger.info(f"词典加载完成: {pdict.char_count} 个单字, {pdict.word_count} 个多音词 ({dict_dir})")
        return pdict

    @property
    def char_pinyins(self) -> Mapping[str, str]:
        return self._char_pinyins

    @property
    def word_pinyins(self) -> Mapping[str, str]:
        return self._word_pinyins

    @property
    def char_count(self) -> int:
        return len(self._char_pinyins)

    @property
    def word_count(self) -> int:
        return len(self._word_pinyins)

    def get_char_pinyin(self, char: str) -> Optional[str]:
        """单字原始拼音串，无数据返回 None"""
        pinyin = self._char_pinyins.get(char)
        if pinyin is None or pinyin == NO_PINYIN:
            return None
        return pinyin

    def get_word_pinyin(self, word: str) -> Optional[str]:
        """多音词原始拼音串，无数据返回 None"""
        pinyin = self._word_pinyins.get(word)
        if pinyin is None or pinyin == NO_PINYIN:
            return None
        return pinyin


def load_default_dictionary() -> PinyinDictionary:
    """加载包内自带词典"""
    return PinyinDictionary.load(DEFAULT_DICT_DIR)
