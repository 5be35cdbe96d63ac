"""
どこで: `engine.ui.hud.text`。
何を: HUD に渡すテキスト一式 `HUDText`（pyglet 非依存）。
なぜ: 表示内容の組み立て側が GUI ライブラリを import せずに済むようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class HUDText:
    """HUD に表示するテキスト一式。先頭行はタイトルとして大きく描く。"""

    lines: Sequence[str] = field(default_factory=tuple)
    footer: str | None = None


__all__ = ["HUDText"]
