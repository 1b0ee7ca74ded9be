import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class PinyinFormat(Enum):
    """拼音格式"""
    WITH_TONE_MARK = "tone_mark"      # 带声调符号: zhōng
    WITH_TONE_NUMBER = "tone_number"  # 数字声调: zhong1
    WITHOUT_TONE = "no_tone"          # 不带声调: zhong

    @classmethod
    def parse(cls, value: Union[str, "PinyinFormat"]) -> "PinyinFormat":
        """从字符串解析格式（支持枚举值或枚举名，大小写不敏感）"""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for fmt in cls:
            if text.lower() == fmt.value or text.upper() == fmt.name:
                return fmt
        choices = ", ".join(f.value for f in cls)
        raise ValueError(f"未知的拼音格式: {value!r} (可选: {choices})")


@dataclass
class ConverterConfig:
    """转换器配置"""
    # 词典目录，None 表示使用包内自带数据
    dict_dir: Optional[str] = None

    # 拼音之间的分隔符
    separator: str = " "

    # 默认输出格式
    pinyin_format: PinyinFormat = PinyinFormat.WITH_TONE_MARK

    # 日志级别
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """从环境变量读取配置"""
        default = cls()
        return cls(
            dict_dir=os.getenv("HANPIN_DICT_DIR") or default.dict_dir,
            separator=os.getenv("HANPIN_SEPARATOR", default.separator),
            pinyin_format=PinyinFormat.parse(
                os.getenv("HANPIN_FORMAT", default.pinyin_format.value)
            ),
            log_level=os.getenv("HANPIN_LOG_LEVEL", default.log_level).upper(),
        )


# 默认配置实例
DEFAULT_CONFIG = ConverterConfig()
