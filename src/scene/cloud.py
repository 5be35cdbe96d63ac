"""
どこで: `scene.cloud`。
何を: 横方向に流れ、画面端を越えると反対側へ回り込んで高さを再抽選する雲。
"""

from __future__ import annotations

from engine.draw.canvas import Canvas
from util.constants import (
    CLOUD_BAND_Y,
    CLOUD_COLOR,
    CLOUD_DEFAULT_SIZE,
    CLOUD_DEFAULT_SPEED,
    CLOUD_WRAP_X,
)

from .context import SimulationContext
from .entity import Entity

# 5 つの円の (x オフセット, y オフセット, 半径) 係数
_PUFFS = (
    (0.0, 0.0, 1.0),
    (0.8, 0.3, 0.9),
    (-0.8, 0.3, 0.7),
    (0.4, -0.2, 0.6),
    (-0.4, -0.2, 0.6),
)


class Cloud(Entity):
    kind = "cloud"

    def __init__(
        self,
        x: float,
        y: float,
        speed: float = CLOUD_DEFAULT_SPEED,
        size: float = CLOUD_DEFAULT_SIZE,
    ) -> None:
        super().__init__(x, y)
        self.speed = float(speed)
        self.size = float(size)

    def set_speed(self, speed: float) -> None:
        self.speed = float(speed)

    def _advance(self, ctx: SimulationContext) -> None:
        self.x += self.speed
        if self.x > CLOUD_WRAP_X:
            self.x = -CLOUD_WRAP_X
            self.y = ctx.uniform(*CLOUD_BAND_Y)

    def _render(self, canvas: Canvas, ctx: SimulationContext) -> None:
        canvas.set_color(CLOUD_COLOR)
        s = self.size
        for fx, fy, fr in _PUFFS:
            canvas.disc(self.x + s * fx, self.y + s * fy, s * fr)

    def __repr__(self) -> str:
        return f"Cloud(x={self.x:.1f}, y={self.y:.1f}, speed={self.speed}, size={self.size})"


__all__ = ["Cloud"]
