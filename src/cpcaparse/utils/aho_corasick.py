"""
Aho-Corasick 多模式字串匹配（無第三方依賴）

用途：
- 把所有行政區劃名稱加入同一個自動機
- 對輸入地址做一次線性掃描，找出所有命中的名稱與位置

節點以 list 索引保存（arena），fail / output 連結都是整數索引，
build() 之後結構不再變動，可在多執行緒下共享讀取。
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Set

from cpcaparse.core.errors import UsageError

ROOT = 0


class Match(NamedTuple):
    """一次命中：keyword 與半開區間 [start, end)，以 code point 計算"""

    keyword: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass
class _Node:
    next: Dict[str, int] = field(default_factory=dict)
    fail: int = ROOT
    # 最近一個「fail 鏈上結尾有 pattern」的節點，沒有則為 -1
    output: int = -1
    pattern: Optional[str] = None


class AhoCorasick:
    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        self._nodes: List[_Node] = [_Node()]
        self._size = 0
        self._built = False
        if patterns is not None:
            for pattern in patterns:
                self.add_pattern(pattern)

    @property
    def is_built(self) -> bool:
        return self._built

    def __len__(self) -> int:
        return self._size

    def __contains__(self, pattern: object) -> bool:
        if not isinstance(pattern, str) or not pattern:
            return False
        node = ROOT
        for ch in pattern:
            node = self._nodes[node].next.get(ch, -1)
            if node < 0:
                return False
        return self._nodes[node].pattern is not None

    def add_pattern(self, pattern: str) -> None:
        if self._built:
            raise UsageError("AhoCorasick 已 build()，不可再 add_pattern()")
        if not pattern:
            return

        node = ROOT
        for ch in pattern:
            nxt = self._nodes[node].next.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes[node].next[ch] = nxt
                self._nodes.append(_Node())
            node = nxt

        if self._nodes[node].pattern is None:
            self._nodes[node].pattern = pattern
            self._size += 1

    def build(self) -> "AhoCorasick":
        """以 BFS 建立 fail 連結與 output 連結；重複呼叫無副作用"""
        if self._built:
            return self

        nodes = self._nodes
        queue: deque[int] = deque()
        for nxt in nodes[ROOT].next.values():
            nodes[nxt].fail = ROOT
            queue.append(nxt)

        while queue:
            r = queue.popleft()
            for ch, u in nodes[r].next.items():
                queue.append(u)

                v = nodes[r].fail
                while v != ROOT and ch not in nodes[v].next:
                    v = nodes[v].fail
                fail = nodes[v].next.get(ch, ROOT)
                nodes[u].fail = fail

                # fail 節點本身有 pattern 就指向它，否則沿用它的 output
                fail_node = nodes[fail]
                nodes[u].output = fail if fail_node.pattern is not None else fail_node.output

        self._built = True
        return self

    def iter_matches(self, text: str) -> Iterator[Match]:
        """
        逐一輸出 matches

        同一個結尾位置先輸出最長的 pattern，再沿 output 連結輸出較短的後綴，
        因此整體順序為 end 遞增、同 end 時 start 遞增。

        Yields:
            Match(keyword, start, end)
            - start: match 起始 index（含）
            - end: match 結束 index（不含）
        """
        if not self._built:
            self.build()
        if not text:
            return

        nodes = self._nodes
        state = ROOT
        for i, ch in enumerate(text):
            while state != ROOT and ch not in nodes[state].next:
                state = nodes[state].fail
            state = nodes[state].next.get(ch, ROOT)

            hit = state if nodes[state].pattern is not None else nodes[state].output
            while hit > ROOT:
                word = nodes[hit].pattern
                yield Match(word, i - len(word) + 1, i + 1)
                hit = nodes[hit].output

    def find_all(self, text: str) -> List[Match]:
        return list(self.iter_matches(text))

    def search(self, text: str) -> Set[str]:
        """只回傳命中的 pattern 集合（不含位置）"""
        return {match.keyword for match in self.iter_matches(text)}
