"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（ダブルバッファ/MSAA/背景クリア）と、描画・文字入力・終了・リサイズの
      コールバック登録を提供。
なぜ: シーン/レンダラ層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(1000, 700, bg_color=(0.53, 0.81, 0.92, 1.0))

    def draw_scene():
        renderer.draw(...)

    win.add_draw_callback(draw_scene)
    win.set_text_handler(lambda ch: controls.handle_key(ch, scene, ctx))
    pyglet.app.run()
"""

from __future__ import annotations

import logging
from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor
from pyglet.window import key

logger = logging.getLogger(__name__)


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Windmills",
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトルバー文字列。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # 円盤の縁を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        try:
            super().__init__(
                width=width, height=height, caption=caption, config=config, resizable=resizable
            )
        except pyglet.window.NoSuchConfigException:
            logger.warning("MSAA config unavailable; falling back to default config")
            super().__init__(width=width, height=height, caption=caption, resizable=resizable)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._resize_callbacks: list[Callable[[int, int], None]] = []
        self._text_handler: Callable[[str], None] | None = None
        self._quit_handler: Callable[[], None] | None = None

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def add_resize_callback(self, func: Callable[[int, int], None]) -> None:
        """フレームバッファサイズ (w, h) を受け取るリサイズ関数を登録する。"""
        self._resize_callbacks.append(func)

    def set_text_handler(self, func: Callable[[str], None]) -> None:
        """1 文字ずつ呼ばれる文字入力ハンドラを設定する。"""
        self._text_handler = func

    def set_quit_handler(self, func: Callable[[], None]) -> None:
        """ESC で呼ばれる終了ハンドラを設定する（未設定ならウィンドウを閉じる）。"""
        self._quit_handler = func

    # ---- Pyglet イベント ----
    def on_draw(self):
        """ウィンドウ描画イベントハンドラ。背景をクリアし、描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_text(self, text: str):
        if self._text_handler is None:
            return
        for ch in text:
            self._text_handler(ch)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.ESCAPE:
            if self._quit_handler is not None:
                self._quit_handler()
            else:
                self.close()
            return pyglet.event.EVENT_HANDLED
        return None

    def on_resize(self, width: int, height: int):
        # pyglet 既定の viewport/projection（HUD ラベル用）を維持したうえで通知する
        super().on_resize(width, height)
        fb_w, fb_h = self.get_framebuffer_size()
        for cb in self._resize_callbacks:
            cb(fb_w, fb_h)

    # ---- helpers ----
    def set_background_color(self, rgba: tuple[float, float, float, float]) -> None:
        """背景色 RGBA(0–1) を更新する。次フレームから反映。"""
        r, g, b, a = rgba
        self._bg_color = (float(r), float(g), float(b), float(a))

    @property
    def background_color(self) -> tuple[float, float, float, float]:
        return self._bg_color
