"""
どこで: `api.app`（実行ランナー / CLI）。
何を: 既定シーンを構築し、固定ティックの更新・描画・キーボード操作・HUD を pyglet のイベントループへ結線する。
なぜ: シーン（純データ）と GUI/GL の結線を一箇所に集約し、入口を `run()` / `main()` の 2 つに絞るため。

実行フロー（概要）:
1) 設定解決: YAML（`util.utils.load_config()`）→ 環境変数（`common.settings`）→ 引数の順に上書き。
2) シーン構築: `SimulationContext`（シード付き乱数源）と既定配置の `Scene` を生成。
3) `init_only=True` ならここで `SimulationApp` を返す（pyglet/ModernGL を import しない）。
4) ウィンドウ/GL: `RenderWindow` と `ShapeRenderer` を生成（論理座標 x∈[-500,500], y∈[-350,350]）。
5) フレーム駆動: `FrameClock(step=tick)` がシーン更新と HUD を駆動し、`pyglet.clock` から呼ばれる。
6) 入力: 文字入力は `api.controls.handle_key` へ。`r` の後は設定に応じて既定配置で再構築する。

スレッド:
- すべて pyglet のメインループ上で直列に実行される（ロック不要）。
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Sequence

from common.logging import setup_default_logging
from common.settings import get as get_settings
from engine.core.tickable import Tickable
from engine.draw.canvas import Canvas
from engine.ui.hud.config import HUDConfig
from scene.background import SceneColors, draw_ground
from scene.context import SimulationContext
from scene.presets import populate_default
from scene.scene import Scene
from util.constants import WINDOW_CAPTION, WINDOW_HEIGHT, WINDOW_WIDTH
from util.utils import config_section, load_config

from .controls import Action, handle_key
from .runner.utils import resolve_fps, resolve_seed, resolve_tick_seconds, resolve_window
from .status import hud_text

logger = logging.getLogger(__name__)

BANNER = """
+-------------------------------------------------------+
|                                                       |
|          ENHANCED WINDMILL SIMULATION                 |
|                                                       |
|          pyglet & ModernGL                            |
|                                                       |
+-------------------------------------------------------+

Controls:
  1-5       - Select windmill
  +/-       - Adjust speed
  T         - Stop/start selected windmill
  D/N       - Day/Night mode
  C         - Add cloud
  W         - Add windmill
  S         - Toggle sun animation
  P         - Pause/Resume
  R         - Reset
  Q/ESC     - Exit
"""


@dataclass
class SimulationApp:
    """実行に必要な状態一式（ウィンドウ非依存）。"""

    scene: Scene
    ctx: SimulationContext
    colors: SceneColors = field(default_factory=SceneColors)
    fps: int = 60
    tick_seconds: float = 0.016
    reset_repopulates: bool = True
    hud: HUDConfig = field(default_factory=HUDConfig)
    window: tuple[int, int, str] = (WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_CAPTION)
    quit_requested: bool = False

    def press(self, key: str) -> Action:
        """キーを 1 つ処理する。リセット後の再配置と終了要求の記録もここで行う。"""
        action = handle_key(key, self.scene, self.ctx)
        if action is Action.RESET and self.reset_repopulates:
            populate_default(self.scene)
            logger.debug("scene repopulated: %r", self.scene)
        elif action is Action.QUIT:
            self.quit_requested = True
        return action

    def render(self, canvas: Canvas) -> None:
        """地面→シーンの順に Canvas へ記録する（空色はウィンドウのクリア色で塗る）。"""
        draw_ground(canvas, self.ctx, self.colors)
        self.scene.draw_all(canvas, self.ctx)


class SceneTicker(Tickable):
    """FrameClock の 1 ステップを `Scene.update_all` 1 回に対応付ける。"""

    def __init__(self, scene: Scene, ctx: SimulationContext):
        self.scene = scene
        self.ctx = ctx

    def tick(self, dt: float) -> None:
        self.scene.update_all(self.ctx)


def prepare(
    *,
    fps: int | None = None,
    seed: int | None = None,
    show_hud: bool | None = None,
    config: Mapping[str, Any] | None = None,
) -> SimulationApp:
    """設定を解決して既定シーンを構築する（GUI 依存なし）。"""
    cfg = dict(config) if config is not None else load_config()
    app_cfg = config_section(cfg, "app")
    settings = get_settings()

    ctx = SimulationContext.seeded(resolve_seed(seed, app_cfg))
    scene = populate_default(Scene())

    if show_hud is None:
        show_hud = settings.SHOW_HUD
    hud = HUDConfig.from_config(config_section(cfg, "hud"))
    if not show_hud:
        hud = replace(hud, enabled=False)

    return SimulationApp(
        scene=scene,
        ctx=ctx,
        colors=SceneColors.from_config(config_section(cfg, "scene", "colors")),
        fps=resolve_fps(fps, app_cfg),
        tick_seconds=resolve_tick_seconds(app_cfg),
        reset_repopulates=bool(app_cfg.get("reset_repopulates", True)),
        hud=hud,
        window=resolve_window(config_section(cfg, "window")),
    )


def run(
    *,
    fps: int | None = None,
    seed: int | None = None,
    show_hud: bool | None = None,
    init_only: bool = False,
    config: Mapping[str, Any] | None = None,
) -> SimulationApp:
    """風車シミュレーションを実行する。

    Parameters
    ----------
    fps : int | None
        描画レート。None で設定ファイル（`app.fps`）から解決。
    seed : int | None
        乱数シード。None で `WMS_SEED` → `app.seed` → エントロピーの順に解決。
    show_hud : bool | None
        HUD の有効/無効。None で `WMS_SHOW_HUD` と `hud.enabled` に従う。
    init_only : bool
        True でウィンドウを開かずに構築済みの `SimulationApp` を返す。
    config : Mapping | None
        YAML の代わりに使う構成辞書（テスト用）。

    Notes
    -----
    - `Q`/`ESC` で終了し、GL リソースを解放して返る。
    """
    app = prepare(fps=fps, seed=seed, show_hud=show_hud, config=config)
    if init_only:
        return app

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from engine.core.frame_clock import FrameClock
    from engine.ui.hud.overlay import StatusOverlay

    from .runner.render import create_window_and_renderer

    width, height, caption = app.window
    window, _mgl_ctx, renderer = create_window_and_renderer(
        width, height, caption=caption, background=app.colors.sky(app.ctx)
    )

    overlay: StatusOverlay | None = None
    if app.hud.enabled:
        overlay = StatusOverlay(window, lambda: hud_text(app.scene, app.ctx), config=app.hud)
        overlay.tick(0.0)
        window.add_resize_callback(overlay.on_resize)

    canvas = Canvas()

    def _draw_main() -> None:
        canvas.reset()
        app.render(canvas)
        renderer.draw(canvas.finish())
        if overlay is not None:
            overlay.draw()

    window.add_draw_callback(_draw_main)

    tickables: list[Tickable] = [SceneTicker(app.scene, app.ctx)]
    if overlay is not None:
        tickables.append(overlay)
    frame_clock = FrameClock(tickables, step=app.tick_seconds)

    def _shutdown() -> None:
        pyglet.clock.unschedule(frame_clock.tick)
        renderer.release()
        window.close()
        pyglet.app.exit()

    def _on_key(ch: str) -> None:
        action = app.press(ch)
        if action in (Action.DAY, Action.NIGHT):
            window.set_background_color(app.colors.sky(app.ctx))
        elif action is Action.QUIT:
            _shutdown()

    window.set_text_handler(_on_key)
    window.set_quit_handler(lambda: _on_key("\x1b"))

    pyglet.clock.schedule_interval(frame_clock.tick, app.tick_seconds)
    logger.info("Starting simulation (fps=%d, tick=%.3fs)", app.fps, app.tick_seconds)
    pyglet.app.run(1 / app.fps)
    return app


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Interactive windmill / cloud / sun animation.")
    p.add_argument("--fps", type=int, default=None, help="redraw rate (default: app.fps or 60)")
    p.add_argument("--seed", type=int, default=None, help="random seed for clouds/windmills")
    p.add_argument("--no-hud", action="store_true", help="hide the status overlay")
    p.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ...")
    p.add_argument(
        "--init-only", action="store_true", help="resolve config and build the scene, then exit"
    )
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_default_logging(args.log_level or get_settings().LOG_LEVEL)
    print(BANNER)
    app = run(
        fps=args.fps,
        seed=args.seed,
        show_hud=False if args.no_hud else None,
        init_only=args.init_only,
    )
    if args.init_only:
        logger.info("init-only: %r", app.scene)
    return 0


__all__ = ["SimulationApp", "SceneTicker", "prepare", "run", "parse_args", "main"]
