"""
どこで: `engine.ui.hud.config`。
何を: ステータス表示（HUD）の設定（有効/無効、フォント、文字色、余白、操作説明の表示）を定義する。
なぜ: HUD の表示を宣言的に制御し、YAML の `hud:` セクションから上書きできるようにするため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from util.color import normalize_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HUDConfig:
    """HUD の表示設定。

    Parameters
    ----------
    enabled : bool
        HUD 全体の有効/無効。
    font_name : str | None
        フォント名（None でシステム既定）。
    font_size : int
        本文（モード/選択中の風車/操作説明）の文字サイズ [pt]。
    title_font_size : int
        タイトル行の文字サイズ [pt]。
    text_color : str | tuple
        文字色（Hex / 0..1 / 0..255）。
    show_controls : bool
        画面下部の操作説明の表示有無。
    margin_px : int
        ウィンドウ端からの余白（px）。
    line_gap_px : int
        行間（px）。
    """

    enabled: bool = True
    font_name: str | None = None
    font_size: int = 12
    title_font_size: int = 18
    text_color: Any = "#FFFFFF"
    show_controls: bool = True
    margin_px: int = 20
    line_gap_px: int = 6

    @classmethod
    def from_config(cls, section: Mapping[str, Any] | None, **overrides: Any) -> "HUDConfig":
        """`hud:` セクション（未知キーは無視）と明示上書きから生成する。"""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for k, v in (section or {}).items():
            if k not in known:
                logger.debug("unknown hud config key ignored: %s", k)
                continue
            if v is None and k != "font_name":
                continue
            values[k] = v
        values.update({k: v for k, v in overrides.items() if v is not None})
        if "text_color" in values:
            try:
                normalize_color(values["text_color"])
            except ValueError as e:
                logger.warning("invalid hud.text_color %r: %s", values["text_color"], e)
                del values["text_color"]
        try:
            for k in ("font_size", "title_font_size", "margin_px", "line_gap_px"):
                if k in values:
                    values[k] = int(values[k])
            for k in ("enabled", "show_controls"):
                if k in values:
                    values[k] = bool(values[k])
        except (TypeError, ValueError) as e:
            logger.warning("invalid hud config %r: %s", dict(section or {}), e)
            kept = {k: v for k, v in overrides.items() if v is not None and k in values}
            return replace(cls(), **kept)
        return cls(**values)


__all__ = ["HUDConfig"]
