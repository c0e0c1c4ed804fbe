"""
どこで: `motion.baseline`
何を: ターゲットの初期変換（位置/回転/スケール）を記録する `BaselineState` と捕捉関数。
なぜ: 振動の中心を固定形状のレコードで保持し、アニメータ自身が書き換えないことを型で示すため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from common.types import Vec2


@dataclass(frozen=True)
class BaselineState:
    position: Vec2
    rotation: float  # [deg]
    scale: Vec2


def capture_baseline(target: Any, *, force_center_pivot: bool = False) -> BaselineState:
    """`target` の現在の変換を記録して返す。

    `force_center_pivot` が真なら、記録の前にピボットをサイズの半分へ移す。
    ピボット変更は回転/スケールの中心を変えるだけで、記録値には影響しない。
    """
    if force_center_pivot:
        w, h = target.size
        target.pivot_offset = (float(w) * 0.5, float(h) * 0.5)
    px, py = target.position
    sx, sy = target.scale
    return BaselineState(
        position=(float(px), float(py)),
        rotation=float(target.rotation_degrees),
        scale=(float(sx), float(sy)),
    )


__all__ = ["BaselineState", "capture_baseline"]
