"""
どこで: `api` 入口（高レベル公開 API）。
何を: `IdleMotion`・`AnimationConfig`・`CanvasNode`・`FrameClock` と取り付け/プレビュー関数を再輸出。
なぜ: 利用者が単一名前空間からノード生成→モーション取り付け→実行まで完結できるようにするため。

Usage:
    from api import AnimationConfig, CanvasNode, attach, drive

    node = CanvasNode((64, 64), position=(100, 100))
    motion, clock = attach(node, AnimationConfig(animate_rotation=True))
    drive(clock, frames=60, dt=1 / 60)
"""

from common.wave import sine_offset, sine_offset2
from engine.core.frame_clock import FrameClock
from engine.core.node import CanvasNode
from motion import AnimationConfig, BaselineState, IdleMotion, MotionState

from .runner import attach, drive, run_preview
from .runner import run_preview as run

__all__ = [
    "AnimationConfig",
    "BaselineState",
    "CanvasNode",
    "FrameClock",
    "IdleMotion",
    "MotionState",
    "attach",
    "drive",
    "run",
    "run_preview",
    "sine_offset",
    "sine_offset2",
]

# バージョン情報
__version__ = "2026.10"
