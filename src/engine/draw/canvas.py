"""
どこで: `engine.draw` の即時モード描画プリミティブ。
何を: 色設定・凸多角形・円盤・線分（太さ付き）と 2D 変換スタック（translate/rotate）を受け付け、
      呼び出し順の着色三角形列 `DrawList` に記録する。
なぜ: 描画順＝呼び出し順を保ったまま 1 回の GPU 転送で描けるようにし、GL 無しで検証可能にするため。

データモデル:
- `positions: float32 (N, 2)`: 三角形頂点（3 行で 1 三角形）。変換スタック適用後の論理座標。
- `colors: float32 (N, 4)`: 各頂点の RGBA（0–1）。

使用例:
    canvas = Canvas()
    canvas.set_color((1.0, 1.0, 0.0))
    canvas.push()
    canvas.translate(0, 100)
    canvas.rotate(45)
    canvas.polygon([(0, 0), (-5, 24), (5, 24)])
    canvas.pop()
    draw_list = canvas.finish()
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from util.color import RGBA, normalize_color

PointLike = Sequence[float]

_EMPTY_POS = np.zeros((0, 2), dtype=np.float32)
_EMPTY_COL = np.zeros((0, 4), dtype=np.float32)


class DrawList:
    """1 フレーム分の着色三角形列。"""

    __slots__ = ("positions", "colors")

    def __init__(self, positions: np.ndarray, colors: np.ndarray) -> None:
        pos = np.ascontiguousarray(positions, dtype=np.float32).reshape(-1, 2)
        col = np.ascontiguousarray(colors, dtype=np.float32).reshape(-1, 4)
        if pos.shape[0] != col.shape[0]:
            raise ValueError("positions と colors の行数が一致しません。")
        if pos.shape[0] % 3 != 0:
            raise ValueError("頂点数は 3 の倍数である必要があります。")
        self.positions = pos
        self.colors = col

    @classmethod
    def empty(cls) -> "DrawList":
        return cls(_EMPTY_POS, _EMPTY_COL)

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3

    @property
    def is_empty(self) -> bool:
        return self.vertex_count == 0

    def interleaved(self) -> np.ndarray:
        """`(x, y, r, g, b, a)` を 1 行とする float32 配列を返す（VBO 転送用）。"""
        return np.ascontiguousarray(np.hstack([self.positions, self.colors]), dtype=np.float32)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"DrawList(triangles={self.triangle_count})"


def _rotation(deg: float) -> np.ndarray:
    rad = math.radians(deg)
    c, s = math.cos(rad), math.sin(rad)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)


def _translation(dx: float, dy: float) -> np.ndarray:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]], dtype=np.float64)


class Canvas:
    """即時モード描画の記録器。

    - 変換は `glPushMatrix/glRotatef` と同じく右から掛ける（後に指定した変換が先に効く）。
    - 多角形は凸を前提に扇形分割する。
    """

    def __init__(self) -> None:
        self._pos_chunks: list[np.ndarray] = []
        self._col_chunks: list[np.ndarray] = []
        self._color: RGBA = (1.0, 1.0, 1.0, 1.0)
        self._matrix = np.eye(3, dtype=np.float64)
        self._stack: list[np.ndarray] = []

    # ---- 状態 ----
    @property
    def color(self) -> RGBA:
        return self._color

    @property
    def depth(self) -> int:
        """変換スタックの深さ。"""
        return len(self._stack)

    def set_color(self, color: object) -> None:
        self._color = normalize_color(color)

    def push(self) -> None:
        self._stack.append(self._matrix.copy())

    def pop(self) -> None:
        if not self._stack:
            raise IndexError("pop() without matching push()")
        self._matrix = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._matrix = self._matrix @ _translation(float(dx), float(dy))

    def rotate(self, deg: float) -> None:
        """反時計回りに `deg` 度回転する。"""
        self._matrix = self._matrix @ _rotation(float(deg))

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        px, py, _ = self._matrix @ np.array([x, y, 1.0])
        return float(px), float(py)

    # ---- プリミティブ ----
    def polygon(self, vertices: Iterable[PointLike]) -> None:
        """塗り潰し凸多角形。"""
        verts = np.asarray(list(vertices), dtype=np.float64).reshape(-1, 2)
        if verts.shape[0] < 3:
            raise ValueError(f"polygon には 3 点以上が必要です: {verts.shape[0]}")
        n = verts.shape[0]
        idx = np.empty((n - 2, 3), dtype=np.int64)
        idx[:, 0] = 0
        idx[:, 1] = np.arange(1, n - 1)
        idx[:, 2] = np.arange(2, n)
        self._emit(verts[idx.ravel()])

    def disc(self, cx: float, cy: float, radius: float, segments: int = 100) -> None:
        """塗り潰し円（中心＋半径＋分割数）。"""
        if segments < 3:
            raise ValueError(f"segments must be >= 3, got {segments}")
        ring = _ring_points(cx, cy, radius, segments)
        nxt = np.roll(ring, -1, axis=0)
        center = np.broadcast_to(np.array([cx, cy], dtype=np.float64), ring.shape)
        tris = np.stack([center, ring, nxt], axis=1).reshape(-1, 2)
        self._emit(tris)

    def line(self, x1: float, y1: float, x2: float, y2: float, width: float = 1.0) -> None:
        """太さ `width`（論理単位）の線分を四角形として記録する。長さ 0 は無視。"""
        p1 = np.array([x1, y1], dtype=np.float64)
        p2 = np.array([x2, y2], dtype=np.float64)
        quad = _segment_quad(p1, p2, float(width))
        if quad is not None:
            self._emit(quad)

    def line_loop(self, points: Iterable[PointLike], width: float = 1.0) -> None:
        """閉じた折れ線。"""
        pts = np.asarray(list(points), dtype=np.float64).reshape(-1, 2)
        if pts.shape[0] < 2:
            return
        quads = [
            q
            for q in (
                _segment_quad(pts[i], pts[(i + 1) % len(pts)], float(width))
                for i in range(len(pts))
            )
            if q is not None
        ]
        if quads:
            self._emit(np.concatenate(quads, axis=0))

    def circle_outline(
        self, cx: float, cy: float, radius: float, segments: int = 50, width: float = 1.0
    ) -> None:
        if segments < 3:
            raise ValueError(f"segments must be >= 3, got {segments}")
        self.line_loop(_ring_points(cx, cy, radius, segments), width=width)

    # ---- 出力 ----
    def finish(self) -> DrawList:
        """記録済みの三角形を `DrawList` として返す（記録は保持）。"""
        if not self._pos_chunks:
            return DrawList.empty()
        return DrawList(np.concatenate(self._pos_chunks), np.concatenate(self._col_chunks))

    def reset(self) -> None:
        """記録・変換スタック・色を初期状態に戻す。"""
        self._pos_chunks.clear()
        self._col_chunks.clear()
        self._matrix = np.eye(3, dtype=np.float64)
        self._stack.clear()
        self._color = (1.0, 1.0, 1.0, 1.0)

    # ---- internal ----
    def _emit(self, local: np.ndarray) -> None:
        m = self._matrix
        world = local @ m[:2, :2].T + m[:2, 2]
        self._pos_chunks.append(world.astype(np.float32))
        self._col_chunks.append(np.tile(np.asarray(self._color, dtype=np.float32), (len(world), 1)))


def _ring_points(cx: float, cy: float, radius: float, segments: int) -> np.ndarray:
    theta = 2.0 * np.pi * np.arange(segments, dtype=np.float64) / float(segments)
    return np.column_stack([cx + radius * np.cos(theta), cy + radius * np.sin(theta)])


def _segment_quad(p1: np.ndarray, p2: np.ndarray, width: float) -> np.ndarray | None:
    d = p2 - p1
    length = float(np.hypot(d[0], d[1]))
    if length == 0.0:
        return None
    n = np.array([-d[1], d[0]]) / length * (width * 0.5)
    a, b, c, e = p1 + n, p1 - n, p2 - n, p2 + n
    return np.stack([a, b, c, a, c, e])


__all__ = ["Canvas", "DrawList"]
