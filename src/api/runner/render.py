"""
どこで: `api.runner.render`
何を: RenderWindow/ModernGL/ShapeRenderer の初期化（ブレンド設定・投影行列・viewport 連動）。
なぜ: `api.app` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

import logging
from typing import Any

import moderngl

from util.constants import WORLD_BOTTOM, WORLD_LEFT, WORLD_RIGHT, WORLD_TOP

from .utils import build_projection

logger = logging.getLogger(__name__)


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    caption: str,
    background: tuple[float, float, float, float],
) -> tuple[Any, moderngl.Context, Any]:
    """ウィンドウ/ModernGL/ShapeRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, shape_renderer)
    """
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import ShapeRenderer

    rendering_window = RenderWindow(
        window_width, window_height, caption=caption, bg_color=background
    )

    # ModernGL コンテキスト（pyglet が作成した GL コンテキストを共有）
    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)
    logger.debug("GL: %s", mgl_ctx.info.get("GL_RENDERER", "unknown"))

    # 論理座標系は固定（リサイズ時は viewport のみ追従して引き伸ばす）
    proj = build_projection(WORLD_LEFT, WORLD_RIGHT, WORLD_BOTTOM, WORLD_TOP)
    shape_renderer = ShapeRenderer(mgl_context=mgl_ctx, projection_matrix=proj)
    fb_w, fb_h = rendering_window.get_framebuffer_size()
    shape_renderer.set_viewport(fb_w, fb_h)
    rendering_window.add_resize_callback(shape_renderer.set_viewport)

    return rendering_window, mgl_ctx, shape_renderer


__all__ = ["create_window_and_renderer"]
