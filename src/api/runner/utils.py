"""
どこで: `api.runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/ティック/乱数シード/ウィンドウサイズの解決と、論理座標系の正射影行列を提供。
なぜ: 優先順位（CLI > 環境変数 > YAML > 既定）を一箇所で決め、テストしやすくするため。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np

from common.settings import get as get_settings
from util.constants import TICK_MS, WINDOW_CAPTION, WINDOW_HEIGHT, WINDOW_WIDTH

logger = logging.getLogger(__name__)


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def resolve_fps(requested_fps: int | None, app_cfg: Mapping[str, Any] | None, *, default: int = 60) -> int:
    """描画 FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（数値化できない/<=0 は既定へ）。
    - それ以外は `app.fps`、失敗時は既定値。
    """
    if requested_fps is not None:
        v = _as_int(requested_fps, default)
        return v if v >= 1 else max(1, int(default))
    return max(1, _as_int((app_cfg or {}).get("fps", default), default))


def resolve_tick_seconds(app_cfg: Mapping[str, Any] | None) -> float:
    """シーン更新の固定ステップ [s] を返す（`WMS_TICK_MS` > `app.tick_ms` > 16ms）。"""
    env_ms = get_settings().TICK_MS
    if env_ms is not None:
        return env_ms / 1000.0
    ms = _as_int((app_cfg or {}).get("tick_ms", TICK_MS), TICK_MS)
    return max(1, ms) / 1000.0


def resolve_seed(requested_seed: int | None, app_cfg: Mapping[str, Any] | None) -> int | None:
    """乱数シードを解決する（CLI > `WMS_SEED` > `app.seed` > None）。"""
    if requested_seed is not None:
        return int(requested_seed)
    env_seed = get_settings().SEED
    if env_seed is not None:
        return env_seed
    raw = (app_cfg or {}).get("seed")
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("invalid app.seed %r; using entropy", raw)
        return None


def resolve_window(window_cfg: Mapping[str, Any] | None) -> tuple[int, int, str]:
    """(幅, 高さ, キャプション) を返す。幅/高さは 1 以上にクランプ。"""
    cfg = window_cfg or {}
    width = max(1, _as_int(cfg.get("width", WINDOW_WIDTH), WINDOW_WIDTH))
    height = max(1, _as_int(cfg.get("height", WINDOW_HEIGHT), WINDOW_HEIGHT))
    caption = str(cfg.get("caption") or WINDOW_CAPTION)
    return width, height, caption


def build_projection(left: float, right: float, bottom: float, top: float) -> "np.ndarray":
    """論理座標 [left,right]x[bottom,top] を NDC へ写す正射影行列（ModernGL 用の転置済み）。"""
    if right == left or top == bottom:
        raise ValueError(f"degenerate projection bounds: {(left, right, bottom, top)}")
    proj = np.array(
        [
            [2 / (right - left), 0, 0, -(right + left) / (right - left)],
            [0, 2 / (top - bottom), 0, -(top + bottom) / (top - bottom)],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


__all__ = [
    "resolve_fps",
    "resolve_tick_seconds",
    "resolve_seed",
    "resolve_window",
    "build_projection",
]
