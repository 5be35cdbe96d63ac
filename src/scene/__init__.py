"""
どこで: `scene` パッケージ。
何を: 風車・雲・太陽/月のエンティティと、それらを所有して一括更新/描画する `Scene`。
なぜ: アニメーション状態を GL/ウィンドウから切り離し、単体で検証できるようにするため。
"""

from .celestial import CelestialBody
from .cloud import Cloud
from .context import SimulationContext
from .entity import Entity
from .ids import WindmillIdGenerator
from .scene import EntityKey, Scene
from .windmill import Windmill

__all__ = [
    "CelestialBody",
    "Cloud",
    "Entity",
    "EntityKey",
    "Scene",
    "SimulationContext",
    "Windmill",
    "WindmillIdGenerator",
]
