"""
どこで: `engine.core` サブパッケージ。
何を: フレーム駆動（Tickable/FrameClock）・変換ターゲット（CanvasNode）・描画ウィンドウを提供。
なぜ: モーション層から見たホスト側の協調部品を集約し、上位層（api）から再利用可能にするため。
"""
