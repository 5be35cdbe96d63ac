"""
どこで: `api.status`。
何を: シーンとモード状態から HUD 用テキスト（タイトル/モード/選択中の風車/操作説明）を組み立てる。
なぜ: 表示内容を純関数に閉じ込め、pyglet 無しで検証できるようにするため。
"""

from __future__ import annotations

from engine.ui.hud.text import HUDText
from scene.context import SimulationContext
from scene.scene import Scene

TITLE = "Enhanced Windmill Simulation"
CONTROLS = (
    "Controls: 1-5 Select | +/- Speed | T Stop/Start | D Day | N Night | C Cloud | "
    "W Windmill | S Sun | P Pause | R Reset | Q Quit"
)


def mode_line(ctx: SimulationContext) -> str:
    line = "Mode: " + ("DAY" if ctx.is_day else "NIGHT")
    if ctx.is_paused:
        line += " (PAUSED)"
    return line


def status_lines(scene: Scene, ctx: SimulationContext) -> list[str]:
    lines = [TITLE, mode_line(ctx)]
    windmill = scene.selected_windmill(ctx)
    if windmill is not None:
        state = "ROTATING" if windmill.rotating else "STOPPED"
        lines.append(
            f"Windmill #{ctx.selected_windmill}: Speed = {windmill.rotation_speed:.1f} "
            f"| Status = {state}"
        )
    return lines


def hud_text(scene: Scene, ctx: SimulationContext) -> HUDText:
    return HUDText(lines=tuple(status_lines(scene, ctx)), footer=CONTROLS)


__all__ = ["TITLE", "CONTROLS", "mode_line", "status_lines", "hud_text"]
