"""
どこで: `engine.core` サブパッケージ。
何を: フレーム駆動（Tickable/FrameClock）と描画ウィンドウを提供。
なぜ: シーン更新と描画の基盤を構成し、上位層（UI/Render/API）から再利用可能にするため。
"""
