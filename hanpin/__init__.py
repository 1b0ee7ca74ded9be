"""
HanPin - 汉字转拼音

多音词按词注音，支持带声调符号、数字声调、无声调三种格式
"""

__version__ = "0.1.0"

from typing import List

from hanpin.engine import (
    PinyinConverter,
    create_converter,
    get_converter,
    ConverterConfig,
    PinyinFormat,
    PinyinDictionary,
    is_chinese_character,
    contains_chinese,
    WordTrie,
    Segment,
    HanPinError,
    DictionaryFormatError,
    ToneMarkError,
)


def convert_to_pinyin_list(c: str, pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK) -> List[str]:
    """单个汉字转拼音（默认词典）"""
    return get_converter().convert_character(c, pinyin_format)


def convert_to_pinyin_string(
    statement: str,
    separator: str = " ",
    pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK,
) -> str:
    """字符串转拼音（默认词典）"""
    return get_converter().convert_statement(statement, separator, pinyin_format)


def is_multi_pinyin(c: str) -> bool:
    """是否为多音字（默认词典）"""
    return get_converter().is_multi_pinyin(c)


__all__ = [
    "__version__",
    # 便捷函数
    "convert_to_pinyin_list",
    "convert_to_pinyin_string",
    "is_multi_pinyin",
    # 转换器
    "PinyinConverter",
    "create_converter",
    "get_converter",
    "ConverterConfig",
    "PinyinFormat",
    # 词典 / 切分
    "PinyinDictionary",
    "is_chinese_character",
    "contains_chinese",
    "WordTrie",
    "Segment",
    # 异常
    "HanPinError",
    "DictionaryFormatError",
    "ToneMarkError",
]
