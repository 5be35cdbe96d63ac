from __future__ import annotations

import pytest

from engine.draw.canvas import Canvas
from scene.background import SceneColors, draw_ground
from util.color import normalize_color
from util.constants import GROUND_DAY, GROUND_NIGHT, GROUND_TOP, SKY_DAY, SKY_NIGHT


def test_sky_and_ground_follow_day_mode(ctx) -> None:
    colors = SceneColors()
    assert colors.sky(ctx) == normalize_color(SKY_DAY)
    assert colors.ground(ctx) == normalize_color(GROUND_DAY)
    ctx.is_day = False
    assert colors.sky(ctx) == normalize_color(SKY_NIGHT)
    assert colors.ground(ctx) == normalize_color(GROUND_NIGHT)


def test_from_config_overrides_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        colors = SceneColors.from_config({"sky_day": "#000000", "ground_night": "nope"})
    assert colors.sky_day == (0.0, 0.0, 0.0, 1.0)
    assert colors.ground_night == SceneColors().ground_night
    assert "ground_night" in caplog.text


def test_draw_ground_emits_one_band(ctx) -> None:
    canvas = Canvas()
    draw_ground(canvas, ctx)
    dl = canvas.finish()
    assert dl.triangle_count == 2
    assert float(dl.positions[:, 1].max()) == pytest.approx(GROUND_TOP)
