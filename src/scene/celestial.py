"""
どこで: `scene.celestial`。
何を: 太陽/月。昼は 30° 間隔の 12 本の光線を伴う円盤として描く。
なぜ: 空の演出。位相 `phase_angle` は進むが描画位置には反映しない（見た目上の状態のみ）。
"""

from __future__ import annotations

import math

from engine.draw.canvas import Canvas
from util.constants import CELESTIAL_PHASE_STEP, CELESTIAL_RAY_COUNT, SUN_COLOR

from .context import SimulationContext
from .entity import Entity

RAY_INNER_GAP = 5.0
RAY_OUTER_GAP = 15.0


class CelestialBody(Entity):
    kind = "celestial"

    def __init__(
        self,
        x: float,
        y: float,
        radius: float = 30.0,
        color: tuple[float, float, float] = SUN_COLOR,
    ) -> None:
        super().__init__(x, y)
        self.radius = float(radius)
        self.color = tuple(float(c) for c in color)
        self.phase_angle = 0.0

    def update(self, ctx: SimulationContext) -> None:
        if not ctx.animate_celestial:
            return
        super().update(ctx)

    def _advance(self, ctx: SimulationContext) -> None:
        self.phase_angle += CELESTIAL_PHASE_STEP
        if self.phase_angle >= 360.0:
            self.phase_angle = 0.0

    def _render(self, canvas: Canvas, ctx: SimulationContext) -> None:
        canvas.set_color(self.color)
        if ctx.is_day:
            step = 360.0 / CELESTIAL_RAY_COUNT
            for i in range(CELESTIAL_RAY_COUNT):
                a = math.radians(step * i)
                c, s = math.cos(a), math.sin(a)
                inner = self.radius + RAY_INNER_GAP
                outer = self.radius + RAY_OUTER_GAP
                canvas.line(
                    self.x + inner * c,
                    self.y + inner * s,
                    self.x + outer * c,
                    self.y + outer * s,
                )
        canvas.disc(self.x, self.y, self.radius)


__all__ = ["CelestialBody"]
