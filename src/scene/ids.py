"""
どこで: `scene.ids`。
何を: 風車 ID の単調増加カウンタと生存数の管理（ID は実行中に再利用しない）。
なぜ: クラス静的カウンタの代わりに Scene が所有し、ID の再利用を防ぐため。
"""

from __future__ import annotations


class WindmillIdGenerator:
    """`next_id()` は常に直前より大きい ID を返す。`release()` は生存数だけを減らす。"""

    def __init__(self, start: int = 0) -> None:
        self._last = int(start)
        self._live = 0

    @property
    def live_count(self) -> int:
        return self._live

    def next_id(self) -> int:
        self._last += 1
        self._live += 1
        return self._last

    def release(self) -> None:
        if self._live > 0:
            self._live -= 1


__all__ = ["WindmillIdGenerator"]
