"""
どこで: `api` 入口（高レベル公開 API）。
何を: 実行ランナー `run`・キーボード操作 `handle_key`・シーン型を再輸出。
なぜ: 利用者が単一名前空間からシーン構築→操作→実行まで完結できるようにするため。

Usage:
    from api import run

    run(fps=60, seed=42)
"""

from scene import CelestialBody, Cloud, Scene, SimulationContext, Windmill

from .app import SimulationApp, main, prepare, run
from .controls import Action, handle_key

__all__ = [
    "run",
    "prepare",
    "main",
    "SimulationApp",
    "Action",
    "handle_key",
    "Scene",
    "SimulationContext",
    "Windmill",
    "Cloud",
    "CelestialBody",
]
