"""
异常定义

查不到拼音不算错误（返回空列表或原样输出），这里只放数据损坏类的异常。
"""


class HanPinError(Exception):
    """HanPin 异常基类"""


class DictionaryFormatError(HanPinError):
    """词典文件无法解析"""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"词典格式错误: {self.path}: {reason}")


class ToneMarkError(HanPinError, AssertionError):
    """带调字母不在声调表中（静态数据损坏）"""

    def __init__(self, syllable: str, char: str):
        self.syllable = syllable
        self.char = char
        super().__init__(f"未知的声调字母 {char!r} (拼音: {syllable!r})")
