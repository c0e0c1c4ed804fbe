"""
どこで: `engine.core` の 2D 変換ターゲット。
何を: 位置/回転（度）/スケール/ピボット/サイズを持つ矩形ノード `CanvasNode` と、
      ローカル座標→キャンバス座標への変換（ピボット中心のスケール→回転→平行移動）。
なぜ: アイドルモーションが書き換える変換フィールドの契約を具体化し、
      プレビュー描画やテストから同じノードを使い回すため。

座標系:
- `position` はノード原点（矩形の左上）のキャンバス座標 [px]。
- `pivot_offset` はノード原点から見た回転/スケール中心 [px]。
- `rotation_degrees` は度数法。正で反時計回り（数学座標系）。
"""

from __future__ import annotations

import math

import numpy as np

from common.types import Vec2, as_vec2


class CanvasNode:
    """矩形ノード。変換フィールドはそのまま読み書きできる。

    引数:
        size: 矩形サイズ (w, h) [px]。
        position: 初期位置。
        rotation_degrees: 初期回転 [度]。
        scale: 初期スケール。
        pivot_offset: 初期ピボット（ノード原点基準）。
        name: 表示用の名前。
    """

    def __init__(
        self,
        size: Vec2 = (100.0, 100.0),
        *,
        position: Vec2 = (0.0, 0.0),
        rotation_degrees: float = 0.0,
        scale: Vec2 = (1.0, 1.0),
        pivot_offset: Vec2 = (0.0, 0.0),
        name: str = "node",
    ) -> None:
        self.size: Vec2 = as_vec2(size, name="size")
        self.position: Vec2 = as_vec2(position, name="position")
        self.rotation_degrees = float(rotation_degrees)
        self.scale: Vec2 = as_vec2(scale, name="scale")
        self.pivot_offset: Vec2 = as_vec2(pivot_offset, name="pivot_offset")
        self.name = name

    def matrix(self) -> np.ndarray:
        """ローカル→キャンバスの 3x3 同次変換行列を返す。

        適用順は `T(position) · T(pivot) · R · S · T(-pivot)`。
        """
        px, py = self.pivot_offset
        sx, sy = self.scale
        tx, ty = self.position
        th = math.radians(self.rotation_degrees)
        c, s = math.cos(th), math.sin(th)

        to_pivot = np.array([[1.0, 0.0, -px], [0.0, 1.0, -py], [0.0, 0.0, 1.0]])
        scale_m = np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])
        rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        back = np.array([[1.0, 0.0, px + tx], [0.0, 1.0, py + ty], [0.0, 0.0, 1.0]])
        return back @ rot @ scale_m @ to_pivot

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """ローカル座標 (N, 2) をキャンバス座標 (N, 2) へ変換する。"""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"points は (N, 2) が必要（受領: {pts.shape}）")
        if pts.shape[0] == 0:
            return pts.copy()
        homo = np.hstack([pts, np.ones((pts.shape[0], 1))])
        out = homo @ self.matrix().T
        return out[:, :2]

    def local_corners(self) -> np.ndarray:
        """ローカル座標の矩形 4 隅（左上→右上→右下→左下）。"""
        w, h = self.size
        return np.array([[0.0, 0.0], [w, 0.0], [w, h], [0.0, h]])

    def corners(self) -> np.ndarray:
        """現在の変換を適用した矩形 4 隅。"""
        return self.transform_points(self.local_corners())

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return (
            f"CanvasNode(name={self.name!r}, position={self.position}, "
            f"rotation_degrees={self.rotation_degrees}, scale={self.scale}, "
            f"pivot_offset={self.pivot_offset}, size={self.size})"
        )


__all__ = ["CanvasNode"]
