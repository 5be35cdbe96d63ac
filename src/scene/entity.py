"""
どこで: `scene.entity`。
何を: 位置と可視状態を持ち、1 ティックの `update()` と純粋な `draw()` を約束する抽象基底 `Entity`。
なぜ: Cloud/CelestialBody/Windmill を Scene から一様に更新・描画するため。
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.draw.canvas import Canvas

from .context import SimulationContext


class Entity(ABC):
    """描画可能なシーン要素の基底。

    - `update()` は不可視または一時停止中なら何もしない。
    - `draw()` は状態を変更しない（Canvas への記録のみ）。不可視なら何も記録しない。
    - サブクラスは `_advance()` と `_render()` を実装する。
    """

    kind: str = "entity"

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.visible = True

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)

    def update(self, ctx: SimulationContext) -> None:
        if not self.visible or ctx.is_paused:
            return
        self._advance(ctx)

    def draw(self, canvas: Canvas, ctx: SimulationContext) -> None:
        if not self.visible:
            return
        self._render(canvas, ctx)

    @abstractmethod
    def _advance(self, ctx: SimulationContext) -> None:
        """1 ティック分だけ内部状態を進める。"""

    @abstractmethod
    def _render(self, canvas: Canvas, ctx: SimulationContext) -> None:
        """現在状態を Canvas に記録する。"""


__all__ = ["Entity"]
