"""
どこで: `engine.ui.hud` パッケージ。
何を: ステータス表示（HUD）の設定とオーバーレイを提供する。
なぜ: HUD の有効/無効や表示内容を宣言的に制御するため。
"""

from __future__ import annotations

from .config import HUDConfig

__all__ = ["HUDConfig"]
