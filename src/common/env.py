"""
どこで: `common.env`
何を: `WMS_*` 環境変数の軽量パースヘルパを提供。
なぜ: 各所に散在する `os.getenv` + 例外/境界ガードを簡素化するため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE_WORDS = {"true", "t", "yes", "y", "on"}
_FALSE_WORDS = {"false", "f", "no", "n", "off"}


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値（`None` を渡すと `None` を許容）。
    min_value : Optional[int]
        下限（指定時、結果が下回れば下限に丸める）。
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false, on/off を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    try:
        return int(s) != 0
    except ValueError:
        pass
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    return bool(default)


def env_str(name: str, default: str | None = None) -> str | None:
    """空白を除いた文字列を返す。未設定/空文字は既定値。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["env_int", "env_bool", "env_str"]
