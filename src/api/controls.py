"""
どこで: `api.controls`（キーボード操作）。
何を: 1 文字のキー入力をモード状態（SimulationContext）またはシーン操作（追加/選択/速度）へ写す。
なぜ: 入力の解釈を GUI から切り離し、ウィンドウ無しで操作系を検証できるようにするため。

キー割り当て（英字は大文字/小文字を区別しない）:
- `1`〜`5`: 風車を 1 始まりの番号で選択（範囲外は無視）
- `+` / `=`: 選択中の風車を加速、`-` / `_`: 減速
- `d`: 昼、`n`: 夜
- `c`: ランダムな雲を追加、`w`: ランダムな位置に風車を追加
- `s`: 太陽/月アニメーションの切替、`p`: 一時停止の切替
- `t`: 選択中の風車の回転/停止を切替
- `r`: シーンを空にして選択を 1 に戻す（再配置は呼び出し側）
- `q` / ESC: 終了
"""

from __future__ import annotations

import enum
import logging

from scene.context import SimulationContext
from scene.presets import add_random_windmill, random_cloud
from scene.scene import Scene
from util.constants import MAX_SELECTABLE

logger = logging.getLogger(__name__)

ESCAPE = "\x1b"


class Action(enum.Enum):
    NONE = "none"
    SELECT = "select"
    SPEED_UP = "speed_up"
    SPEED_DOWN = "speed_down"
    TOGGLE_ROTATION = "toggle_rotation"
    DAY = "day"
    NIGHT = "night"
    ADD_CLOUD = "add_cloud"
    ADD_WINDMILL = "add_windmill"
    TOGGLE_CELESTIAL = "toggle_celestial"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"
    QUIT = "quit"


_SELECT_KEYS = {str(i): i for i in range(1, MAX_SELECTABLE + 1)}
_LETTER_ACTIONS = {
    "d": Action.DAY,
    "n": Action.NIGHT,
    "c": Action.ADD_CLOUD,
    "w": Action.ADD_WINDMILL,
    "s": Action.TOGGLE_CELESTIAL,
    "p": Action.TOGGLE_PAUSE,
    "t": Action.TOGGLE_ROTATION,
    "r": Action.RESET,
    "q": Action.QUIT,
}
_SYMBOL_ACTIONS = {
    "+": Action.SPEED_UP,
    "=": Action.SPEED_UP,
    "-": Action.SPEED_DOWN,
    "_": Action.SPEED_DOWN,
    ESCAPE: Action.QUIT,
}


def resolve_action(key: str) -> Action:
    """キー文字を Action に解決する（未割り当ては `Action.NONE`）。"""
    if not key:
        return Action.NONE
    if key in _SELECT_KEYS:
        return Action.SELECT
    if key in _SYMBOL_ACTIONS:
        return _SYMBOL_ACTIONS[key]
    return _LETTER_ACTIONS.get(key.lower(), Action.NONE)


def handle_key(key: str, scene: Scene, ctx: SimulationContext) -> Action:
    """キーを処理し、実際に適用された Action を返す。

    無効な入力（範囲外の選択、選択が無い状態での速度変更など）は何もせず `Action.NONE` を返す。
    `Action.QUIT` は状態を変更しない。終了処理は呼び出し側が行う。
    """
    action = resolve_action(key)

    if action is Action.SELECT:
        index = _SELECT_KEYS[key]
        if not scene.select_windmill(ctx, index):
            logger.debug("selection %d ignored (%d windmills)", index, len(scene.windmills))
            return Action.NONE
        logger.info("Selected Windmill #%d", index)

    elif action in (Action.SPEED_UP, Action.SPEED_DOWN, Action.TOGGLE_ROTATION):
        windmill = scene.selected_windmill(ctx)
        if windmill is None:
            logger.debug("no windmill selected; %s ignored", action.value)
            return Action.NONE
        if action is Action.SPEED_UP:
            logger.info("Speed increased to: %.1f", windmill.increase_speed())
        elif action is Action.SPEED_DOWN:
            logger.info("Speed decreased to: %.1f", windmill.decrease_speed())
        else:
            state = "ROTATING" if windmill.toggle_rotation() else "STOPPED"
            logger.info("Windmill #%d: %s", ctx.selected_windmill, state)

    elif action is Action.DAY:
        ctx.is_day = True
        logger.info("Switched to DAY mode")

    elif action is Action.NIGHT:
        ctx.is_day = False
        logger.info("Switched to NIGHT mode")

    elif action is Action.ADD_CLOUD:
        cloud = random_cloud(ctx)
        scene.add_cloud(cloud)
        logger.info("Added new cloud at (%.1f, %.1f)", cloud.x, cloud.y)

    elif action is Action.ADD_WINDMILL:
        windmill = add_random_windmill(scene, ctx)
        logger.info("Added Windmill #%d (id=%d)", len(scene.windmills), windmill.id)

    elif action is Action.TOGGLE_CELESTIAL:
        on = ctx.toggle_celestial()
        logger.info("Sun/Moon animation: %s", "ON" if on else "OFF")

    elif action is Action.TOGGLE_PAUSE:
        paused = ctx.toggle_pause()
        logger.info("Simulation: %s", "PAUSED" if paused else "RESUMED")

    elif action is Action.RESET:
        logger.info("Resetting simulation...")
        scene.clear()
        ctx.selected_windmill = 1

    elif action is Action.QUIT:
        logger.info("Exiting...")

    else:
        logger.debug("unbound key %r", key)

    return action


__all__ = ["Action", "ESCAPE", "resolve_action", "handle_key"]
