"""
どこで: `scene.presets`。
何を: 既定シーン（風車 3・雲 3・太陽 1）の配置と、キー操作で追加するランダムな雲/風車の生成。
なぜ: 初期化とリセット後の再配置を同じ手順で行い、乱数は `SimulationContext.rng` に一本化するため。
"""

from __future__ import annotations

from util.constants import (
    CLOUD_BAND_Y,
    CLOUD_DEFAULT_SIZE,
    CLOUD_SPAWN_SPEED,
    CLOUD_SPAWN_X,
    SUN_COLOR,
    WINDMILL_SPAWN_X,
    WINDMILL_SPAWN_Y,
)

from .celestial import CelestialBody
from .cloud import Cloud
from .context import SimulationContext
from .scene import Scene
from .windmill import Windmill

# (x, y, tower_width, tower_height, blade_length, blade_count)
DEFAULT_WINDMILLS = (
    (-250.0, -200.0, 30.0, 120.0, 80.0, 4),
    (100.0, -220.0, 35.0, 130.0, 90.0, 4),
    (350.0, -210.0, 28.0, 110.0, 75.0, 4),
)
# (x, y, speed, size)
DEFAULT_CLOUDS = (
    (-300.0, 220.0, 0.3, 25.0),
    (0.0, 250.0, 0.25, 30.0),
    (250.0, 200.0, 0.35, 28.0),
)
DEFAULT_SUN = (350.0, 250.0, 30.0)


def populate_default(scene: Scene) -> Scene:
    """既定の風車/雲/太陽を追加する（既存の内容は残す）。"""
    for params in DEFAULT_WINDMILLS:
        scene.create_windmill(*params)
    for x, y, speed, size in DEFAULT_CLOUDS:
        scene.add_cloud(Cloud(x, y, speed, size))
    sx, sy, radius = DEFAULT_SUN
    scene.set_celestial_body(CelestialBody(sx, sy, radius, SUN_COLOR))
    return scene


def random_cloud(ctx: SimulationContext) -> Cloud:
    x = ctx.uniform(*CLOUD_SPAWN_X)
    y = ctx.uniform(*CLOUD_BAND_Y)
    speed = ctx.uniform(*CLOUD_SPAWN_SPEED)
    return Cloud(x, y, speed, CLOUD_DEFAULT_SIZE)


def add_random_windmill(scene: Scene, ctx: SimulationContext) -> Windmill:
    x = ctx.uniform(*WINDMILL_SPAWN_X)
    y = ctx.uniform(*WINDMILL_SPAWN_Y)
    return scene.create_windmill(x, y)


def build_default_scene() -> Scene:
    return populate_default(Scene())


__all__ = [
    "DEFAULT_WINDMILLS",
    "DEFAULT_CLOUDS",
    "DEFAULT_SUN",
    "populate_default",
    "random_cloud",
    "add_random_windmill",
    "build_default_scene",
]
