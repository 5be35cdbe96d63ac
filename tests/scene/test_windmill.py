from __future__ import annotations

import pytest

from engine.draw.canvas import Canvas
from scene.context import SimulationContext
from scene.windmill import Windmill, clamp_speed


def _mill(**kw) -> Windmill:
    return Windmill(0.0, -200.0, id=kw.pop("id", 1), **kw)


def test_defaults() -> None:
    w = _mill()
    assert w.rotating is True
    assert w.rotation_speed == 2.0
    assert w.blade_angle == 0.0
    assert w.hub == (0.0, -80.0)


def test_update_advances_angle_mod_360(ctx: SimulationContext) -> None:
    w = _mill()
    w.rotation_speed = 15.0
    w.blade_angle = 350.0
    w.update(ctx)
    assert w.blade_angle == pytest.approx(5.0)


@pytest.mark.parametrize("paused,rotating", [(True, True), (False, False), (True, False)])
def test_update_is_noop_when_paused_or_stopped(
    ctx: SimulationContext, paused: bool, rotating: bool
) -> None:
    w = _mill()
    w.blade_angle = 42.0
    w.rotating = rotating
    ctx.is_paused = paused
    w.update(ctx)
    assert w.blade_angle == 42.0


def test_speed_controls_saturate() -> None:
    w = _mill()
    for _ in range(100):
        w.increase_speed()
    assert w.rotation_speed == 15.0
    w.increase_speed()
    assert w.rotation_speed == 15.0
    for _ in range(100):
        w.decrease_speed()
    assert w.rotation_speed == 0.5
    w.decrease_speed()
    assert w.rotation_speed == 0.5


def test_clamp_speed_bounds() -> None:
    assert clamp_speed(-3.0) == 0.5
    assert clamp_speed(99.0) == 15.0
    assert clamp_speed(7.25) == 7.25


def test_toggle_rotation() -> None:
    w = _mill()
    assert w.toggle_rotation() is False
    assert w.toggle_rotation() is True


def test_invalid_blade_count() -> None:
    with pytest.raises(ValueError):
        _mill(blade_count=0)


def _triangles(w: Windmill, ctx: SimulationContext) -> int:
    canvas = Canvas()
    w.draw(canvas, ctx)
    return canvas.finish().triangle_count


def test_selection_ring_only_for_highlighted_id(ctx: SimulationContext) -> None:
    w = _mill(id=2)
    ctx.highlight_id = None
    plain = _triangles(w, ctx)
    ctx.highlight_id = 3
    assert _triangles(w, ctx) == plain
    ctx.highlight_id = 2
    # リングは 50 区間 x 2 三角形
    assert _triangles(w, ctx) == plain + 50 * 2


def test_blade_count_changes_geometry(ctx: SimulationContext) -> None:
    four = _triangles(_mill(blade_count=4), ctx)
    three = _triangles(_mill(blade_count=3), ctx)
    # 羽根 1 枚 = 塗り 3 三角形 + 輪郭 5 辺 x 2 三角形
    assert four - three == 3 + 5 * 2


def test_blades_rotate_about_hub(ctx: SimulationContext) -> None:
    w = _mill(blade_count=1)
    canvas = Canvas()
    w.blade_angle = 90.0
    w._draw_blades(canvas)
    dl = canvas.finish()
    hx, hy = w.hub
    # 先端 (±3, L) は 90° 回転で x ≈ hx - L 側へ
    assert float(dl.positions[:, 0].min()) == pytest.approx(hx - w.blade_length, abs=1.0)
    assert float(dl.positions[:, 1].max()) <= hy + 6.0


def test_draw_is_pure(ctx: SimulationContext) -> None:
    w = _mill()
    w.blade_angle = 33.0
    before = dict(vars(w))
    w.draw(Canvas(), ctx)
    assert vars(w) == before
