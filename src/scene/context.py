"""
どこで: `scene.context`。
何を: 昼夜・一時停止・天体アニメーション・選択中の風車番号と乱数源をまとめた `SimulationContext`。
なぜ: プロセス全域のフラグを避け、各エンティティの update/draw へ明示的に渡して決定的に検証するため。
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class SimulationContext:
    """シミュレーションのモード状態。

    Parameters
    ----------
    is_day : bool
        True で昼（空色・太陽光線）。
    is_paused : bool
        True で全エンティティの `update()` を停止。
    animate_celestial : bool
        False で天体の位相更新のみ停止。
    selected_windmill : int
        1 始まりの選択番号。0 は未選択。
    rng : numpy.random.Generator
        雲の再配置やランダム追加で使う唯一の乱数源。
    highlight_id : int | None
        選択リングを描く風車の ID。`Scene.draw_all` が選択番号から毎フレーム解決する。
    """

    is_day: bool = True
    is_paused: bool = False
    animate_celestial: bool = True
    selected_windmill: int = 1
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)
    highlight_id: int | None = None

    @classmethod
    def seeded(cls, seed: int | None, **kwargs) -> "SimulationContext":
        """シード指定で乱数源を作る（None は OS エントロピー）。"""
        return cls(rng=np.random.default_rng(seed), **kwargs)

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def toggle_pause(self) -> bool:
        self.is_paused = not self.is_paused
        return self.is_paused

    def toggle_celestial(self) -> bool:
        self.animate_celestial = not self.animate_celestial
        return self.animate_celestial


__all__ = ["SimulationContext"]
