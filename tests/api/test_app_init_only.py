from __future__ import annotations


import pytest

from api.app import SceneTicker, main, parse_args, prepare, run
from api.controls import Action
from engine.draw.canvas import Canvas

_CONFIG = {
    "app": {"fps": 30, "tick_ms": 20, "seed": 5, "reset_repopulates": True},
    "window": {"width": 640, "height": 480, "caption": "test"},
    "hud": {"enabled": True, "font_size": 10},
    "scene": {"colors": {"sky_day": "#000000"}},
}


@pytest.mark.smoke
def test_run_init_only_builds_scene_without_window(clean_env: None) -> None:
    app = run(init_only=True, config=_CONFIG)
    assert len(app.scene.windmills) == 3
    assert len(app.scene.clouds) == 3
    assert app.scene.celestial_body is not None
    assert app.fps == 30
    assert app.tick_seconds == pytest.approx(0.02)
    assert app.window == (640, 480, "test")
    assert app.hud.font_size == 10
    assert app.colors.sky_day == (0.0, 0.0, 0.0, 1.0)


def test_same_seed_same_spawns(clean_env: None) -> None:
    a = prepare(config=_CONFIG)
    b = prepare(config=_CONFIG)
    a.press("c")
    b.press("c")
    assert a.scene.clouds[-1].position == b.scene.clouds[-1].position


def test_reset_repopulates_by_default(clean_env: None) -> None:
    app = prepare(config=_CONFIG)
    app.press("2")
    assert app.press("r") is Action.RESET
    assert len(app.scene.windmills) == 3
    assert app.ctx.selected_windmill == 1
    # ID は実行中に再利用しない
    assert [w.id for w in app.scene.windmills] == [4, 5, 6]


def test_reset_can_leave_scene_empty(clean_env: None) -> None:
    cfg = {**_CONFIG, "app": {**_CONFIG["app"], "reset_repopulates": False}}
    app = prepare(config=cfg)
    app.press("r")
    assert len(app.scene) == 0


def test_quit_is_recorded(clean_env: None) -> None:
    app = prepare(config=_CONFIG)
    app.press("q")
    assert app.quit_requested is True


def test_show_hud_false_disables_overlay(clean_env: None) -> None:
    assert prepare(config=_CONFIG, show_hud=False).hud.enabled is False


def test_env_disables_hud(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    from common import settings

    monkeypatch.setenv("WMS_SHOW_HUD", "0")
    settings.reload_from_env()
    assert prepare(config=_CONFIG).hud.enabled is False


def test_render_paints_ground_then_scene(clean_env: None) -> None:
    app = prepare(config=_CONFIG)
    canvas = Canvas()
    app.render(canvas)
    dl = canvas.finish()
    # 先頭 2 三角形は地面帯
    assert tuple(round(float(v), 2) for v in dl.colors[0][:3]) == (0.13, 0.55, 0.13)
    assert dl.triangle_count > 2


def test_scene_ticker_drives_update(clean_env: None) -> None:
    app = prepare(config=_CONFIG)
    SceneTicker(app.scene, app.ctx).tick(0.016)
    assert app.scene.windmills[0].blade_angle == 2.0


def test_parse_args() -> None:
    ns = parse_args(["--fps", "24", "--seed", "3", "--no-hud", "--init-only"])
    assert (ns.fps, ns.seed, ns.no_hud, ns.init_only) == (24, 3, True, True)


@pytest.mark.smoke
def test_main_init_only(capsys: pytest.CaptureFixture[str], clean_env: None) -> None:
    assert main(["--init-only", "--seed", "1"]) == 0
    assert "WINDMILL SIMULATION" in capsys.readouterr().out
