"""
どこで: `common.settings`
何を: `WMS_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # ログ
    LOG_LEVEL: str = "INFO"

    # シミュレーション
    SEED: int | None = None
    TICK_MS: int | None = None

    # HUD
    SHOW_HUD: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 未設定の項目は既定値へ戻す（テストで monkeypatch 後に呼ぶ想定）。
    - `WMS_TICK_MS` は 1 ms 未満を 1 に丸める。
    """
    _settings.LOG_LEVEL = (env_str("WMS_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.SEED = env_int("WMS_SEED", None)
    _settings.TICK_MS = env_int("WMS_TICK_MS", None, min_value=1)
    _settings.SHOW_HUD = env_bool("WMS_SHOW_HUD", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
