"""
どこで: `scene.windmill`。
何を: 塔・回転する羽根・ハブ・選択リングから成る風車。
なぜ: 回転角は `rotating` かつ非一時停止のときだけ進み、速度はキー操作で上下限内に調整される。

描画の層（下から）:
1) 塔（台形）と扉（長方形）
2) 羽根（`360 / blade_count` 間隔の涙滴形）。ハブ点 `(x, y + tower_height)` を中心に一体で回転
3) ハブ（同心円 2 枚）
4) 選択リング（半径 100 の 50 分割円周）。選択番号が指す風車（`ctx.highlight_id`）のときのみ
"""

from __future__ import annotations

from engine.draw.canvas import Canvas
from util.constants import (
    BLADE_COLOR,
    BLADE_OUTLINE_COLOR,
    BOLT_COLOR,
    DOOR_COLOR,
    HUB_COLOR,
    SELECTION_COLOR,
    SELECTION_RING_RADIUS,
    SELECTION_RING_SEGMENTS,
    TOWER_COLOR,
    WINDMILL_DEFAULT_SPEED,
    WINDMILL_SPEED_MAX,
    WINDMILL_SPEED_MIN,
    WINDMILL_SPEED_STEP,
)

from .context import SimulationContext
from .entity import Entity

DOOR_HALF_WIDTH = 8.0
DOOR_HEIGHT = 30.0
HUB_RADIUS = 15.0
BOLT_RADIUS = 8.0
SELECTION_RING_WIDTH = 3.0


def clamp_speed(value: float) -> float:
    return max(WINDMILL_SPEED_MIN, min(WINDMILL_SPEED_MAX, float(value)))


class Windmill(Entity):
    kind = "windmill"

    def __init__(
        self,
        x: float,
        y: float,
        tower_width: float = 30.0,
        tower_height: float = 120.0,
        blade_length: float = 80.0,
        blade_count: int = 4,
        *,
        id: int,
    ) -> None:
        super().__init__(x, y)
        if int(blade_count) < 1:
            raise ValueError(f"blade_count must be >= 1, got {blade_count}")
        self.id = int(id)
        self.tower_width = float(tower_width)
        self.tower_height = float(tower_height)
        self.blade_length = float(blade_length)
        self.blade_count = int(blade_count)
        self.blade_angle = 0.0
        self.rotation_speed = WINDMILL_DEFAULT_SPEED
        self.rotating = True

    @property
    def hub(self) -> tuple[float, float]:
        return (self.x, self.y + self.tower_height)

    # ---- 操作 ----
    def toggle_rotation(self) -> bool:
        self.rotating = not self.rotating
        return self.rotating

    def increase_speed(self) -> float:
        self.rotation_speed = clamp_speed(self.rotation_speed + WINDMILL_SPEED_STEP)
        return self.rotation_speed

    def decrease_speed(self) -> float:
        self.rotation_speed = clamp_speed(self.rotation_speed - WINDMILL_SPEED_STEP)
        return self.rotation_speed

    # ---- Entity ----
    def _advance(self, ctx: SimulationContext) -> None:
        if not self.rotating:
            return
        self.blade_angle = (self.blade_angle + self.rotation_speed) % 360.0

    def _render(self, canvas: Canvas, ctx: SimulationContext) -> None:
        self._draw_tower(canvas)
        self._draw_blades(canvas)
        self._draw_hub(canvas)
        if ctx.highlight_id is not None and self.id == ctx.highlight_id:
            self._draw_selection(canvas)

    def _draw_tower(self, canvas: Canvas) -> None:
        x, y, w, h = self.x, self.y, self.tower_width, self.tower_height
        canvas.set_color(TOWER_COLOR)
        canvas.polygon([(x - w / 2, y), (x + w / 2, y), (x + w / 3, y + h), (x - w / 3, y + h)])
        canvas.set_color(DOOR_COLOR)
        canvas.polygon(
            [
                (x - DOOR_HALF_WIDTH, y),
                (x + DOOR_HALF_WIDTH, y),
                (x + DOOR_HALF_WIDTH, y + DOOR_HEIGHT),
                (x - DOOR_HALF_WIDTH, y + DOOR_HEIGHT),
            ]
        )

    def _blade_outline(self) -> list[tuple[float, float]]:
        L = self.blade_length
        return [(0.0, 0.0), (-5.0, L * 0.3), (-3.0, L), (3.0, L), (5.0, L * 0.3)]

    def _draw_blades(self, canvas: Canvas) -> None:
        blade = self._blade_outline()
        step = 360.0 / self.blade_count
        canvas.push()
        canvas.translate(*self.hub)
        canvas.rotate(self.blade_angle)
        for i in range(self.blade_count):
            canvas.push()
            canvas.rotate(i * step)
            canvas.set_color(BLADE_COLOR)
            canvas.polygon(blade)
            canvas.set_color(BLADE_OUTLINE_COLOR)
            canvas.line_loop(blade)
            canvas.pop()
        canvas.pop()

    def _draw_hub(self, canvas: Canvas) -> None:
        cx, cy = self.hub
        canvas.set_color(HUB_COLOR)
        canvas.disc(cx, cy, HUB_RADIUS)
        canvas.set_color(BOLT_COLOR)
        canvas.disc(cx, cy, BOLT_RADIUS)

    def _draw_selection(self, canvas: Canvas) -> None:
        cx, cy = self.hub
        canvas.set_color(SELECTION_COLOR)
        canvas.circle_outline(
            cx, cy, SELECTION_RING_RADIUS, SELECTION_RING_SEGMENTS, width=SELECTION_RING_WIDTH
        )

    def __repr__(self) -> str:
        return (
            f"Windmill(id={self.id}, x={self.x:.1f}, y={self.y:.1f}, "
            f"speed={self.rotation_speed}, rotating={self.rotating})"
        )


__all__ = ["Windmill", "clamp_speed"]
