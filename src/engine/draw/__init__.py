"""
どこで: `engine.draw` サブパッケージ。
何を: 即時モード風のベクタ描画 API（Canvas）と、その出力である三角形列（DrawList）を提供。
なぜ: シーン側を GL から切り離し、描画内容を純データとしてテスト可能にするため。
"""

from .canvas import Canvas, DrawList

__all__ = ["Canvas", "DrawList"]
