"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 位置＋色をインターリーブした VBO と VAO の確保・更新・解放を担当する `ShapeMesh`。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

VERTEX_FORMAT = "2f 4f"
VERTEX_ATTRS = ("in_vert", "in_color")
VERTEX_STRIDE = 6 * 4


class ShapeMesh:
    """
    GPUに着色三角形の頂点データを送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期GPUメモリ確保量（既定: 1MB）。必要に応じて自動拡張。
        initial_reserve: int = 1024 * 1024,
    ):
        """
        ctx: moderngl コンテキスト
        program: `in_vert`(vec2) と `in_color`(vec4) を受け取るシェーダープログラム
        VBO (Vertex Buffer Object): `(x, y, r, g, b, a)` を並べた頂点データ
        VAO (Vertex Array Object): VBO とシェーダ属性の対応付け
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()
        self.vertex_count: int = 0

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(
            self.program, [(self.vbo, VERTEX_FORMAT, *VERTEX_ATTRS)]
        )

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, nbytes: int) -> None:
        """データが大きくなったらGPUのバッファを再確保し、VAO を張り直す"""
        if nbytes <= self.vbo.size:
            return
        new_size = max(nbytes, self.vbo.size * 2, self.initial_reserve)
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=new_size, dynamic=True)
        self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """`(N, 6)` float32 の頂点をGPUへ送り込む"""
        data = np.ascontiguousarray(vertices, dtype=np.float32)
        self._ensure_capacity(data.nbytes)
        self.vbo.orphan()
        self.vbo.write(data.tobytes())
        self.vertex_count = int(data.shape[0]) if data.ndim == 2 else int(data.size // 6)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vao.release()
        self.vbo.release()


__all__ = ["ShapeMesh", "VERTEX_FORMAT", "VERTEX_ATTRS"]
