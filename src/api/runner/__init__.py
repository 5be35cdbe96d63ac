"""
どこで: `api.runner`。
何を: `api.app` の実行ランナーを支える純粋関数（設定解決・投影行列）とウィンドウ/GL 初期化。
なぜ: `api.app` を薄く保ち、テスト容易性と再利用性を上げるため。
"""
