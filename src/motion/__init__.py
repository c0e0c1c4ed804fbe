"""
どこで: `motion` パッケージ。
何を: アイドルモーション（設定・基準値・正弦波アニメータ）を提供。
なぜ: ノード変換への加算的な待機モーションを、ホストエンジンから独立した層にまとめるため。
"""

from .baseline import BaselineState, capture_baseline
from .config import AnimationConfig
from .idle import IdleMotion, MotionState

__all__ = [
    "AnimationConfig",
    "BaselineState",
    "capture_baseline",
    "IdleMotion",
    "MotionState",
]
