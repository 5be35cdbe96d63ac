"""
どこで: `scene.scene`。
何を: 全エンティティを単一のアリーナ（キー→実体, 挿入順＝描画順）で所有し、
      種類別ビュー（風車/雲/天体）をキーで保持する `Scene`。
なぜ: 所有を一箇所に限定してビューとの不整合（二重解放/宙吊り参照）を構造的に排除するため。

不変条件:
- 種類別ビューのキーは必ずアリーナに存在する（逆に、風車/雲はそれぞれのビューに必ず載る）。
- 天体は 1 つだけ。`set_celestial_body` の再呼び出しは同じ描画位置で置き換える。
"""

from __future__ import annotations

import logging

from engine.draw.canvas import Canvas

from .celestial import CelestialBody
from .cloud import Cloud
from .context import SimulationContext
from .entity import Entity
from .ids import WindmillIdGenerator
from .windmill import Windmill

logger = logging.getLogger(__name__)

EntityKey = int


class Scene:
    def __init__(self) -> None:
        self._arena: dict[EntityKey, Entity] = {}
        self._next_key: EntityKey = 0
        self._windmill_keys: list[EntityKey] = []
        self._cloud_keys: list[EntityKey] = []
        self._celestial_key: EntityKey | None = None
        self.ids = WindmillIdGenerator()

    # ---- 追加 ----
    def _insert(self, entity: Entity) -> EntityKey:
        key = self._next_key
        self._next_key += 1
        self._arena[key] = entity
        return key

    def add_windmill(self, windmill: Windmill) -> EntityKey:
        key = self._insert(windmill)
        self._windmill_keys.append(key)
        return key

    def add_cloud(self, cloud: Cloud) -> EntityKey:
        key = self._insert(cloud)
        self._cloud_keys.append(key)
        return key

    def set_celestial_body(self, body: CelestialBody) -> EntityKey:
        """天体を設定する。既存があれば同じキー（描画位置）で置き換える。"""
        if self._celestial_key is not None:
            logger.debug("replacing celestial body in slot %d", self._celestial_key)
            self._arena[self._celestial_key] = body
            return self._celestial_key
        key = self._insert(body)
        self._celestial_key = key
        return key

    def create_windmill(
        self,
        x: float,
        y: float,
        tower_width: float = 30.0,
        tower_height: float = 120.0,
        blade_length: float = 80.0,
        blade_count: int = 4,
    ) -> Windmill:
        """ID を払い出して風車を生成し、シーンへ追加する。"""
        windmill = Windmill(
            x,
            y,
            tower_width,
            tower_height,
            blade_length,
            blade_count,
            id=self.ids.next_id(),
        )
        self.add_windmill(windmill)
        return windmill

    # ---- 削除 ----
    def remove(self, key: EntityKey) -> Entity:
        """キーのエンティティを取り除いて返す。未知キーは KeyError。"""
        entity = self._arena.pop(key)
        if key in self._windmill_keys:
            self._windmill_keys.remove(key)
            self.ids.release()
        elif key in self._cloud_keys:
            self._cloud_keys.remove(key)
        elif key == self._celestial_key:
            self._celestial_key = None
        return entity

    def clear(self) -> None:
        """全エンティティを解放し、ビューを空にする（再配置は呼び出し側の責務）。"""
        count = len(self._arena)
        for _ in self._windmill_keys:
            self.ids.release()
        self._arena.clear()
        self._windmill_keys.clear()
        self._cloud_keys.clear()
        self._celestial_key = None
        logger.debug("scene cleared (%d entities released)", count)

    # ---- 参照 ----
    def get(self, key: EntityKey) -> Entity:
        return self._arena[key]

    @property
    def entities(self) -> list[Entity]:
        return list(self._arena.values())

    @property
    def windmills(self) -> list[Windmill]:
        return [self._arena[k] for k in self._windmill_keys]  # type: ignore[misc]

    @property
    def clouds(self) -> list[Cloud]:
        return [self._arena[k] for k in self._cloud_keys]  # type: ignore[misc]

    @property
    def celestial_body(self) -> CelestialBody | None:
        if self._celestial_key is None:
            return None
        return self._arena[self._celestial_key]  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._arena)

    # ---- 選択 ----
    def windmill_at(self, index: int) -> Windmill | None:
        """1 始まりの番号で風車を返す。範囲外は None。"""
        if 1 <= index <= len(self._windmill_keys):
            return self._arena[self._windmill_keys[index - 1]]  # type: ignore[return-value]
        return None

    def selected_windmill(self, ctx: SimulationContext) -> Windmill | None:
        return self.windmill_at(ctx.selected_windmill)

    def select_windmill(self, ctx: SimulationContext, index: int) -> bool:
        """範囲内なら選択を更新して True。範囲外は何もしない。"""
        if self.windmill_at(index) is None:
            return False
        ctx.selected_windmill = index
        return True

    # ---- フレーム ----
    def update_all(self, ctx: SimulationContext) -> None:
        for entity in self._arena.values():
            entity.update(ctx)

    def draw_all(self, canvas: Canvas, ctx: SimulationContext) -> None:
        selected = self.selected_windmill(ctx)
        ctx.highlight_id = selected.id if selected is not None else None
        for entity in self._arena.values():
            entity.draw(canvas, ctx)

    def __repr__(self) -> str:
        return (
            f"Scene(windmills={len(self._windmill_keys)}, clouds={len(self._cloud_keys)}, "
            f"celestial={self._celestial_key is not None})"
        )


__all__ = ["Scene", "EntityKey"]
