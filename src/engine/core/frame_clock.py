"""
どこで: `engine.core` の固定ステップ・フレームドライバ。
何を: 実経過時間を蓄積し、`step` 秒ごとに `Tickable` の列を固定順序で呼び出す FrameClock。
なぜ: シーンは「1 ティック＝固定量」で進むため、描画レートの揺らぎに関わらず更新回数を揃えるため。
"""

from __future__ import annotations

import logging
import time
from typing import Sequence

from .tickable import Tickable

logger = logging.getLogger(__name__)


class FrameClock:
    """登録された Tickable を固定ステップで実行する小さなクラス。

    - `tick(dt)` は経過時間を蓄積し、`step` を満たした回数だけ各 Tickable を呼ぶ。
    - 長時間停止からの復帰で暴走しないよう、1 回の呼び出しで最大 `max_catchup` ステップに制限する。
    - `step=None` の場合は蓄積せず、毎回 1 度だけ `dt` をそのまま渡す。
    """

    def __init__(
        self,
        tickables: Sequence[Tickable],
        *,
        step: float | None = None,
        max_catchup: int = 5,
    ):
        if step is not None and step <= 0.0:
            raise ValueError(f"step must be > 0, got {step}")
        self._tickables = tuple(tickables)
        self._step = step
        self._max_catchup = max(1, int(max_catchup))
        self._accumulator = 0.0
        self._last_time = time.perf_counter()
        self.ticks = 0

    @property
    def step(self) -> float | None:
        return self._step

    # GUI フレームワークから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> int:
        """経過時間 `dt` を処理し、実行したステップ数を返す。"""
        if dt is None:  # pyglet は dt を渡してくれる
            now = time.perf_counter()  # 他フレームワーク用
            dt = now - self._last_time
            self._last_time = now

        if self._step is None:
            self._run(dt)
            return 1

        self._accumulator += max(0.0, float(dt))
        steps = 0
        while self._accumulator >= self._step and steps < self._max_catchup:
            self._accumulator -= self._step
            self._run(self._step)
            steps += 1
        if steps == self._max_catchup and self._accumulator >= self._step:
            logger.debug("frame clock dropped %.3fs of backlog", self._accumulator)
            self._accumulator = 0.0
        return steps

    def _run(self, dt: float) -> None:
        for t in self._tickables:
            t.tick(dt)
        self.ticks += 1
