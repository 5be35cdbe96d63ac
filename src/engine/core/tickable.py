"""
どこで: `engine.core` の更新インターフェース。
何を: 1 ティック更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: シーン更新/HUD などフレーム駆動のオブジェクトを FrameClock から一様に扱うため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 ティック分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """内部状態を `dt` 秒ぶん（固定ステップ時は 1 ステップ）進める。"""
