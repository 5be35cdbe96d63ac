"""
どこで: `engine.ui.hud` の HUD 表示モジュール。
何を: プロバイダが返す状態テキスト（上部の行＋下部の操作説明）を pyglet の Label で描画する。
なぜ: 昼夜/一時停止/選択中の風車の速度を画面上で即座に確認できるようにするため。
"""

from __future__ import annotations

from typing import Callable

import pyglet
from pyglet.window import Window

from util.color import to_u8_rgba

from ...core.tickable import Tickable
from .config import HUDConfig
from .text import HUDText


class StatusOverlay(Tickable):
    """`provider()` の結果を毎ティック取り込み、`draw()` で Label を描く。"""

    def __init__(
        self,
        window: Window,
        provider: Callable[[], HUDText],
        *,
        config: HUDConfig | None = None,
    ):
        self.window = window
        self.provider = provider
        self._config = config or HUDConfig()
        self._color = to_u8_rgba(self._config.text_color)
        self._batch = pyglet.graphics.Batch()
        self._labels: list[pyglet.text.Label] = []
        self._footer: pyglet.text.Label | None = None
        self._text = HUDText()

    @property
    def text(self) -> HUDText:
        return self._text

    def tick(self, dt: float) -> None:
        if not self._config.enabled:
            return
        text = self.provider()
        if text != self._text:
            self._text = text
            self._layout()

    def draw(self) -> None:
        if not self._config.enabled:
            return
        self._batch.draw()

    # ---- internal ----
    def _make_label(self, text: str, size: int, x: int, y: int, anchor_y: str) -> pyglet.text.Label:
        return pyglet.text.Label(
            text,
            font_name=self._config.font_name,
            font_size=size,
            x=x,
            y=y,
            anchor_x="left",
            anchor_y=anchor_y,
            color=self._color,
            batch=self._batch,
        )

    def _layout(self) -> None:
        for label in self._labels:
            label.delete()
        self._labels.clear()
        if self._footer is not None:
            self._footer.delete()
            self._footer = None

        cfg = self._config
        x = cfg.margin_px
        y = self.window.height - cfg.margin_px
        for i, line in enumerate(self._text.lines):
            size = cfg.title_font_size if i == 0 else cfg.font_size
            label = self._make_label(line, size, x, y, "top")
            self._labels.append(label)
            y -= int(label.content_height) + cfg.line_gap_px

        if cfg.show_controls and self._text.footer:
            self._footer = self._make_label(self._text.footer, cfg.font_size, x, cfg.margin_px, "bottom")

    def on_resize(self, _width: int, _height: int) -> None:
        """ウィンドウサイズ変更時に再配置する。"""
        self._layout()


__all__ = ["HUDText", "StatusOverlay"]
