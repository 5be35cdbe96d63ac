"""
どこで: `engine.render` の高レベル描画。
何を: `DrawList`（着色三角形列）をインターリーブ頂点へ変換し、ModernGL に転送して描画する。
なぜ: 毎フレームのアップロード/描画/リソース寿命を一箇所に集約し、描画処理を単純化するため。
"""

from __future__ import annotations

import logging
from typing import Any

import moderngl as mgl
import numpy as np

from engine.draw.canvas import DrawList

logger = logging.getLogger(__name__)


class ShapeRenderer:
    """
    Canvas が記録した DrawList を 1 回の転送と 1 回の描画命令で画面へ送る。
    三角形の順序＝描画順（後に記録したものが上に重なる）。
    """

    def __init__(self, mgl_context: Any, projection_matrix: np.ndarray):
        self.ctx = mgl_context
        self._logger = logger

        # 遅延 import（optional 依存のない環境でも import 可能にするため）
        from .shader import Shader  # local import
        from .shape_mesh import ShapeMesh  # local import

        self.program = Shader.create_shader(mgl_context)
        self.set_projection(projection_matrix)
        self.gpu = ShapeMesh(ctx=mgl_context, program=self.program)
        # HUD 連携用: 直近アップロードの頂点/三角形数
        self._last_vertex_count: int = 0
        self._last_triangle_count: int = 0

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def draw(self, draw_list: DrawList) -> None:
        """DrawList をGPUに送り、三角形として描画する。空なら何もしない。"""
        if draw_list.is_empty:
            self._last_vertex_count = 0
            self._last_triangle_count = 0
            return
        self._upload(draw_list)
        self.gpu.vao.render(mgl.TRIANGLES, vertices=self.gpu.vertex_count)

    def set_projection(self, projection_matrix: np.ndarray) -> None:
        """正射影行列（列優先 4x4, float32）を設定する。"""
        self.program["projection"].write(
            np.ascontiguousarray(projection_matrix, dtype="f4").tobytes()
        )

    def set_viewport(self, width: int, height: int) -> None:
        """描画先の viewport をフレームバッファ全体に合わせる。"""
        self.ctx.viewport = (0, 0, max(1, int(width)), max(1, int(height)))

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.gpu.release()
        self.program.release()

    def get_last_counts(self) -> tuple[int, int]:
        """直近描画の (頂点数, 三角形数) を返す。"""
        return self._last_vertex_count, self._last_triangle_count

    # --------------------------------------------------------------------- #
    # Internal helpers                                                      #
    # --------------------------------------------------------------------- #
    def _upload(self, draw_list: DrawList) -> None:
        vertices = draw_list.interleaved()
        self.gpu.upload(vertices)
        self._last_vertex_count = draw_list.vertex_count
        self._last_triangle_count = draw_list.triangle_count


__all__ = ["ShapeRenderer"]
