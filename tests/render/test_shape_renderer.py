from __future__ import annotations

import logging

import moderngl as mgl
import numpy as np

from engine.draw.canvas import Canvas
from engine.render.renderer import ShapeRenderer
from engine.render.shape_mesh import ShapeMesh


class _DummyVAO:
    def __init__(self) -> None:
        self.render_calls: list[tuple[int, int]] = []
        self.released = False

    def render(self, mode: int, vertices: int = -1) -> None:
        self.render_calls.append((mode, vertices))

    def release(self) -> None:
        self.released = True


class _DummyGpu:
    def __init__(self) -> None:
        self.vertex_count = 0
        self.upload_calls: list[np.ndarray] = []
        self.vao = _DummyVAO()

    def upload(self, verts: np.ndarray) -> None:
        self.vertex_count = int(len(verts))
        self.upload_calls.append(verts.copy())


def _make_renderer() -> tuple[ShapeRenderer, _DummyGpu]:
    # __init__ を通さず、テストに必要な属性だけを手動で設定する
    renderer = ShapeRenderer.__new__(ShapeRenderer)
    renderer._logger = logging.getLogger("test_shape_renderer")  # type: ignore[attr-defined]
    renderer._last_vertex_count = 0  # type: ignore[attr-defined]
    renderer._last_triangle_count = 0  # type: ignore[attr-defined]
    gpu = _DummyGpu()
    renderer.gpu = gpu  # type: ignore[attr-defined]
    return renderer, gpu


def test_draw_uploads_interleaved_and_renders_triangles() -> None:
    renderer, gpu = _make_renderer()
    canvas = Canvas()
    canvas.set_color((1.0, 0.0, 0.0))
    canvas.polygon([(0, 0), (1, 0), (1, 1), (0, 1)])

    renderer.draw(canvas.finish())

    assert len(gpu.upload_calls) == 1
    assert gpu.upload_calls[0].shape == (6, 6)
    assert gpu.vao.render_calls == [(mgl.TRIANGLES, 6)]
    assert renderer.get_last_counts() == (6, 2)


def test_empty_draw_list_skips_gpu() -> None:
    renderer, gpu = _make_renderer()
    renderer._last_vertex_count = 99  # type: ignore[attr-defined]
    renderer.draw(Canvas().finish())
    assert gpu.upload_calls == []
    assert gpu.vao.render_calls == []
    assert renderer.get_last_counts() == (0, 0)


class _DummyBuffer:
    def __init__(self, size: int) -> None:
        self.size = size
        self.data = b""
        self.released = False

    def orphan(self) -> None:
        pass

    def write(self, data: bytes) -> None:
        self.data = data

    def release(self) -> None:
        self.released = True


class _DummyCtx:
    def __init__(self) -> None:
        self.buffers: list[_DummyBuffer] = []
        self.vaos: list[_DummyVAO] = []

    def buffer(self, reserve: int = 0, dynamic: bool = False) -> _DummyBuffer:
        b = _DummyBuffer(reserve)
        self.buffers.append(b)
        return b

    def vertex_array(self, program, content) -> _DummyVAO:  # noqa: ANN001
        vao = _DummyVAO()
        self.vaos.append(vao)
        return vao


def test_mesh_grows_and_rebuilds_vao() -> None:
    ctx = _DummyCtx()
    mesh = ShapeMesh(ctx, program=object(), initial_reserve=64)
    first_vbo, first_vao = mesh.vbo, mesh.vao

    small = np.zeros((2, 6), dtype=np.float32)  # 48 bytes
    mesh.upload(small)
    assert mesh.vbo is first_vbo
    assert mesh.vertex_count == 2

    big = np.ones((30, 6), dtype=np.float32)  # 720 bytes
    mesh.upload(big)
    assert first_vbo.released and first_vao.released
    assert mesh.vbo.size >= big.nbytes
    assert mesh.vbo.data == big.tobytes()
    assert len(ctx.vaos) == 2
    assert mesh.vertex_count == 30
