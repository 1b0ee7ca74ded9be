"""
声调格式转换

词典中的拼音统一为带声调符号的形式，多个音节用逗号连接，如 "chóng,qìng"。
本模块负责将其转换为：
- 带声调符号（原样切分）
- 数字声调：mā → ma1，轻声 ma → ma5
- 不带声调：mā → ma
"""

from typing import List

from .config import PinyinFormat
from .errors import ToneMarkError

PINYIN_SEPARATOR = ","

# 不带声调的元音，v 代表 ü
ALL_UNMARKED_VOWEL = "aeiouv"

# 所有带声调的元音，每个元音按一到四声排列
ALL_MARKED_VOWEL = "āáǎàēéěèīíǐìōóǒòūúǔùǖǘǚǜ"

NEUTRAL_TONE = 5


def split_pinyin(pinyin_string: str) -> List[str]:
    """按分隔符切分拼音串，丢弃空音节"""
    return [p.strip() for p in pinyin_string.split(PINYIN_SEPARATOR) if p.strip()]


def syllable_to_tone_number(syllable: str) -> str:
    """
    单个音节转数字声调

    例：
        'mā' -> 'ma1'
        'lüè' -> 'lve4'
        'ma' -> 'ma5'

    Raises:
        ToneMarkError: 音节中出现声调表以外的非 a-z 字符
    """
    syllable = syllable.replace("ü", "v")

    # 从后往前找带声调的字母
    for char in reversed(syllable):
        if "a" <= char <= "z":
            continue
        index = ALL_MARKED_VOWEL.find(char)
        if index < 0:
            raise ToneMarkError(syllable, char)
        tone = index % 4 + 1
        vowel = ALL_UNMARKED_VOWEL[index // 4]
        return f"{syllable.replace(char, vowel)}{tone}"

    # 没有声调符号即轻声
    return f"{syllable}{NEUTRAL_TONE}"


def convert_with_tone_mark(pinyin_string: str) -> List[str]:
    """带声调符号，只切分"""
    return split_pinyin(pinyin_string)


def convert_with_tone_number(pinyin_string: str) -> List[str]:
    """
    转换为数字声调

    例：
        "mā,ma,duì,nǐ,liǎo,rú,zhǐ,zhǎng" ->
        ['ma1', 'ma5', 'dui4', 'ni3', 'liao3', 'ru2', 'zhi3', 'zhang3']
    """
    return [syllable_to_tone_number(s) for s in split_pinyin(pinyin_string)]


def convert_without_tone(pinyin_string: str) -> List[str]:
    """
    去掉声调

    例：
        "mā,ma,duì,nǐ,liǎo,rú,zhǐ,zhǎng" ->
        ['ma', 'ma', 'dui', 'ni', 'liao', 'ru', 'zhi', 'zhang']
    """
    for index, marked in enumerate(ALL_MARKED_VOWEL):
        pinyin_string = pinyin_string.replace(marked, ALL_UNMARKED_VOWEL[index // 4])
    return split_pinyin(pinyin_string.replace("ü", "v"))


def format_pinyin(pinyin_string: str, pinyin_format: PinyinFormat) -> List[str]:
    """将带声调符号的拼音串转换为指定格式"""
    if pinyin_format is PinyinFormat.WITH_TONE_MARK:
        return convert_with_tone_mark(pinyin_string)
    elif pinyin_format is PinyinFormat.WITH_TONE_NUMBER:
        return convert_with_tone_number(pinyin_string)
    elif pinyin_format is PinyinFormat.WITHOUT_TONE:
        return convert_without_tone(pinyin_string)
    raise ValueError(f"不支持的拼音格式: {pinyin_format!r}")
