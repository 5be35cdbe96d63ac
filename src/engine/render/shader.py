"""
どこで: `engine.render` のシェーダ定義。
何を: 論理座標（x, y）と頂点色（RGBA）を正射影で描く最小 GLSL プログラムを生成する。
なぜ: 描画は着色三角形のみで足りるため、固定機能相当の単純なパイプラインに限定する。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
in vec4 in_color;
out vec4 v_color;
void main() {
    v_color = in_color;
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330
in vec4 v_color;
out vec4 f_color;
void main() {
    f_color = v_color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """ModernGL の Program を生成して返す。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)


__all__ = ["Shader", "VERTEX_SHADER", "FRAGMENT_SHADER"]
