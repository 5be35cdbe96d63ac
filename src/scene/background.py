"""
どこで: `scene.background`。
何を: 昼夜に応じた空のクリア色と地面帯の描画。配色は YAML（`scene.colors`）で上書き可能。
なぜ: 背景はエンティティではなく、`Scene.draw_all` より前に呼び出し側が塗るため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from engine.draw.canvas import Canvas
from util.color import RGBA, normalize_color
from util.constants import (
    GROUND_DAY,
    GROUND_NIGHT,
    GROUND_TOP,
    SKY_DAY,
    SKY_NIGHT,
    WORLD_BOTTOM,
    WORLD_LEFT,
    WORLD_RIGHT,
)

from .context import SimulationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneColors:
    sky_day: RGBA = normalize_color(SKY_DAY)
    sky_night: RGBA = normalize_color(SKY_NIGHT)
    ground_day: RGBA = normalize_color(GROUND_DAY)
    ground_night: RGBA = normalize_color(GROUND_NIGHT)

    @classmethod
    def from_config(cls, section: Mapping[str, Any] | None) -> "SceneColors":
        """`scene.colors` セクションから生成する。不正な色は警告して既定値を使う。"""
        base = cls()
        if not section:
            return base
        values: dict[str, RGBA] = {}
        for name in ("sky_day", "sky_night", "ground_day", "ground_night"):
            raw = section.get(name)
            if raw is None:
                continue
            try:
                values[name] = normalize_color(raw)
            except ValueError as e:
                logger.warning("invalid scene color %s=%r: %s", name, raw, e)
        return replace(base, **values)

    def sky(self, ctx: SimulationContext) -> RGBA:
        return self.sky_day if ctx.is_day else self.sky_night

    def ground(self, ctx: SimulationContext) -> RGBA:
        return self.ground_day if ctx.is_day else self.ground_night


def draw_ground(canvas: Canvas, ctx: SimulationContext, colors: SceneColors | None = None) -> None:
    colors = colors or SceneColors()
    canvas.set_color(colors.ground(ctx))
    canvas.polygon(
        [
            (WORLD_LEFT, WORLD_BOTTOM),
            (WORLD_RIGHT, WORLD_BOTTOM),
            (WORLD_RIGHT, GROUND_TOP),
            (WORLD_LEFT, GROUND_TOP),
        ]
    )


__all__ = ["SceneColors", "draw_ground"]
