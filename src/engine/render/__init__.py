"""
どこで: `engine.render` サブパッケージ。
何を: DrawList → GPU 転送・描画の入口。ShapeRenderer/ShapeMesh/Shader を提供。
なぜ: シーン計算と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
