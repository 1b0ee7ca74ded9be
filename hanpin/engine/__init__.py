import threading
from typing import Optional

from .config import ConverterConfig, PinyinFormat, DEFAULT_CONFIG
from .core import PinyinConverter
from .dictionary import (
    PinyinDictionary,
    load_default_dictionary,
    is_chinese_character,
    contains_chinese,
)
from .errors import HanPinError, DictionaryFormatError, ToneMarkError
from .tone import (
    format_pinyin,
    syllable_to_tone_number,
    convert_with_tone_mark,
    convert_with_tone_number,
    convert_without_tone,
)
from .trie import WordTrie, Segment
from .logging import setup_logging, get_logger, get_api_logger, get_engine_logger

_converter: Optional[PinyinConverter] = None
_converter_lock = threading.Lock()


def create_converter(config: ConverterConfig = None) -> PinyinConverter:
    """
    创建转换器

    Args:
        config: 转换器配置（词典目录等）

    Returns:
        PinyinConverter 实例
    """
    config = config or DEFAULT_CONFIG
    return PinyinConverter(PinyinDictionary.load(config.dict_dir))


def get_converter() -> PinyinConverter:
    """获取默认转换器单例（首次调用时加载词典，线程安全）"""
    global _converter
    if _converter is None:
        with _converter_lock:
            if _converter is None:
                _converter = create_converter(ConverterConfig.from_env())
    return _converter


__all__ = [
    # 转换器
    'PinyinConverter',
    'create_converter',
    'get_converter',
    # 配置
    'ConverterConfig',
    'PinyinFormat',
    # 词典
    'PinyinDictionary',
    'load_default_dictionary',
    'is_chinese_character',
    'contains_chinese',
    # 声调
    'format_pinyin',
    'syllable_to_tone_number',
    'convert_with_tone_mark',
    'convert_with_tone_number',
    'convert_without_tone',
    # 切分
    'WordTrie',
    'Segment',
    # 异常
    'HanPinError',
    'DictionaryFormatError',
    'ToneMarkError',
    # 日志
    'setup_logging',
    'get_logger',
    'get_api_logger',
    'get_engine_logger',
]
