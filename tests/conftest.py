"""共通フィクスチャ。

- 小さな CanvasNode 試料
- 既定を明示した AnimationConfig
"""

from __future__ import annotations

import pytest

from engine.core.node import CanvasNode
from motion.config import AnimationConfig


@pytest.fixture()
def node() -> CanvasNode:
    return CanvasNode(
        (40.0, 20.0),
        position=(100.0, 100.0),
        rotation_degrees=0.0,
        scale=(1.0, 1.0),
    )


@pytest.fixture()
def all_channels() -> AnimationConfig:
    """全チャンネル有効・ピボット強制なし。"""
    return AnimationConfig(
        animate_position=True,
        animate_rotation=True,
        animate_scale=True,
        position_amplitude=(20.0, 20.0),
        rotation_amplitude=10.0,
        scale_amplitude=(0.5, 0.25),
        position_frequency=1.0,
        rotation_frequency=1.0,
        scale_frequency=1.0,
        force_center_pivot=False,
    )
