"""共通フィクスチャ。

- 乱数シード固定の SimulationContext
- 既定配置の Scene
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from scene.context import SimulationContext
from scene.presets import populate_default
from scene.scene import Scene


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy のグローバル乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def ctx() -> SimulationContext:
    return SimulationContext.seeded(1234)


@pytest.fixture()
def paused_ctx() -> SimulationContext:
    return SimulationContext.seeded(1234, is_paused=True)


@pytest.fixture()
def scene() -> Scene:
    return Scene()


@pytest.fixture()
def default_scene() -> Scene:
    return populate_default(Scene())


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`WMS_*` を消した状態で設定を再読込する。"""
    from common import settings

    for name in ("WMS_LOG_LEVEL", "WMS_SEED", "WMS_TICK_MS", "WMS_SHOW_HUD"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    settings.reload_from_env()
