"""
どこで: `common.wave`
何を: 経過時間 t [秒] から正弦波オフセット `A * sin(2π f t)` を返す純粋ロジック。
なぜ: アイドルモーションの各チャンネル（位置/回転/スケール）で同じ式を共有し、
      エンジン/ノードに依存せず単体で検証できるようにするため。

設計方針:
- 純粋・決定的。副作用なし。
- 振幅/周波数の検証はしない（0 は無振動、負は位相反転としてそのまま扱う）。
- ベクトル版は成分ごとに独立した振幅、共通の周波数・位相を用いる。
"""

from __future__ import annotations

import math

from .types import Vec2

TAU = 2.0 * math.pi


def sine_offset(amplitude: float, frequency: float, t: float) -> float:
    """スカラー振幅のオフセット `amplitude * sin(t * frequency * 2π)` を返す。"""
    return float(amplitude) * math.sin(float(t) * float(frequency) * TAU)


def sine_offset2(amplitude: Vec2, frequency: float, t: float) -> Vec2:
    """2D 振幅のオフセット。位相は両軸で共通。"""
    s = math.sin(float(t) * float(frequency) * TAU)
    return (float(amplitude[0]) * s, float(amplitude[1]) * s)


__all__ = ["TAU", "sine_offset", "sine_offset2"]
