"""
どこで: `util.constants`。
何を: 論理座標系・ウィンドウ既定値・シーン配色などの定数を集約。
なぜ: 描画/シーン/HUD が同じ数値を参照し、マジックナンバーの分散を避けるため。
"""

from __future__ import annotations

# 論理座標系（正射影の範囲）
WORLD_LEFT = -500.0
WORLD_RIGHT = 500.0
WORLD_BOTTOM = -350.0
WORLD_TOP = 350.0

# ウィンドウ既定値（px）
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 700
WINDOW_CAPTION = "Enhanced Windmill Simulation"

# 固定ティック（ms）
TICK_MS = 16

# 雲
CLOUD_WRAP_X = 450.0
CLOUD_BAND_Y = (150.0, 280.0)
CLOUD_SPAWN_X = (-450.0, 450.0)
CLOUD_SPAWN_SPEED = (0.2, 0.5)
CLOUD_DEFAULT_SIZE = 25.0
CLOUD_DEFAULT_SPEED = 0.3

# 太陽/月
CELESTIAL_PHASE_STEP = 0.3
CELESTIAL_RAY_COUNT = 12

# 風車
WINDMILL_SPEED_MIN = 0.5
WINDMILL_SPEED_MAX = 15.0
WINDMILL_SPEED_STEP = 0.5
WINDMILL_DEFAULT_SPEED = 2.0
WINDMILL_SPAWN_X = (-400.0, 400.0)
WINDMILL_SPAWN_Y = (-300.0, -180.0)
SELECTION_RING_RADIUS = 100.0
SELECTION_RING_SEGMENTS = 50
MAX_SELECTABLE = 5

# 地面帯（y 範囲）
GROUND_TOP = -150.0

# 配色（RGB 0–1）
SKY_DAY = (0.53, 0.81, 0.92)
SKY_NIGHT = (0.04, 0.04, 0.12)
GROUND_DAY = (0.13, 0.55, 0.13)
GROUND_NIGHT = (0.08, 0.23, 0.08)
SUN_COLOR = (1.0, 0.95, 0.0)
CLOUD_COLOR = (1.0, 1.0, 1.0)
TOWER_COLOR = (0.55, 0.27, 0.07)
DOOR_COLOR = (0.3, 0.15, 0.05)
BLADE_COLOR = (0.95, 0.95, 0.90)
BLADE_OUTLINE_COLOR = (0.7, 0.7, 0.65)
HUB_COLOR = (0.3, 0.3, 0.3)
BOLT_COLOR = (0.2, 0.2, 0.2)
SELECTION_COLOR = (1.0, 1.0, 0.0)
