"""
多音词前缀树

用多音词词典的全部词条构建前缀树，对输入做正向最大匹配：
命中的词整体注音，其余字符逐字注音。
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List

# 词条最少字数
MIN_WORD_LENGTH = 2


@dataclass(frozen=True)
class Segment:
    """切分片段"""
    text: str       # 原文子串
    matched: bool   # 是否命中多音词

    def __str__(self):
        return self.text


class _TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: Dict[str, "_TrieNode"] = {}
        self.is_word = False


class WordTrie:
    """
    多音词前缀树（构建后只读）

    例：
        >>> trie = WordTrie(["银行", "银行家"])
        >>> [(s.text, s.matched) for s in trie.segment("银行家们")]
        [('银行家', True), ('们', False)]
    """

    def __init__(self, words: Iterable[str] = ()):
        self._root = _TrieNode()
        self._word_count = 0
        for word in words:
            self._insert(word)

    def _insert(self, word: str):
        if len(word) < MIN_WORD_LENGTH:
            raise ValueError(f"词条至少需要 {MIN_WORD_LENGTH} 个字: {word!r}")
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = _TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_word

    def longest_match(self, statement: str, start: int = 0) -> int:
        """
        返回从 start 开始的最长词条长度，未命中返回 0
        """
        node = self._root
        longest = 0
        for pos in range(start, len(statement)):
            node = node.children.get(statement[pos])
            if node is None:
                break
            if node.is_word:
                longest = pos - start + 1
        return longest

    def segment(self, statement: str) -> List[Segment]:
        """
        正向最大匹配切分

        命中词条的部分作为一个片段，其余每个字符单独成段。
        所有片段按顺序拼接后等于原文。
        """
        segments = []
        i = 0
        n = len(statement)
        while i < n:
            length = self.longest_match(statement, i)
            if length >= MIN_WORD_LENGTH:
                segments.append(Segment(statement[i:i + length], True))
                i += length
            else:
                segments.append(Segment(statement[i], False))
                i += 1
        return segments
