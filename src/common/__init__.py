"""
どこで: `common` パッケージ。
何を: 環境変数パース・設定・ロギング初期化の軽量ユーティリティ。
なぜ: engine/scene/api から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .env import env_bool, env_int, env_str

__all__ = ["env_bool", "env_int", "env_str"]
