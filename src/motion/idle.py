"""
どこで: `motion.idle`
何を: ノードの位置/回転/スケールを基準値のまわりで正弦波的に揺らす `IdleMotion`。
なぜ: 手描きのアニメーションカーブ無しで「呼吸」のような待機モーションを付与するため。

ライフサイクル:
- 構築 → `on_ready()`（= `activate()`）で基準値を 1 度だけ捕捉 → 毎フレーム `tick(dt)`。
- `reset()` はいつでも基準値へ戻す（経過時間・一時停止状態は変えない）。
- ターゲットが None の場合は何もしない（例外を出さず不活性になる）。

補足:
- tick の可否は毎回チャンネル設定から判定する。起動時に全チャンネル無効でも、
  後から有効化すれば動き出す。
- 無効なチャンネルは書き込まない（無効化した時点の値のまま残る）。
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from common.wave import sine_offset, sine_offset2

from .baseline import BaselineState, capture_baseline
from .config import AnimationConfig

logger = logging.getLogger(__name__)


class MotionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INERT = "inert"  # 活性化時にターゲットが無かった
    READY = "ready"  # 基準値捕捉済み・全チャンネル無効
    ANIMATING = "animating"
    PAUSED = "paused"


class IdleMotion:
    """アイドルモーション本体（`Tickable`）。

    引数:
        target: 変換を書き換えるノード（非所有参照）。`position`/`rotation_degrees`/
            `scale`/`pivot_offset`/`size` を持つこと。None 可。
        config: 設定。省略時は既定値。
    """

    def __init__(self, target: Any | None, config: AnimationConfig | None = None) -> None:
        self.target = target
        self.config = config if config is not None else AnimationConfig()
        self.time_elapsed = 0.0
        self._baseline: BaselineState | None = None
        self._activated = False

    # ---- 状態 ---------------------------------------------------------------
    @property
    def baseline(self) -> BaselineState | None:
        return self._baseline

    @property
    def is_active(self) -> bool:
        """基準値を捕捉済みでターゲットがあるか。"""
        return self._baseline is not None and self.target is not None

    @property
    def is_processing(self) -> bool:
        """今 tick すれば時間と変換が進むか。"""
        cfg = self.config
        return self.is_active and not cfg.paused and cfg.any_channel_enabled

    @property
    def state(self) -> MotionState:
        if not self._activated:
            return MotionState.UNINITIALIZED
        if not self.is_active:
            return MotionState.INERT
        if self.config.paused:
            return MotionState.PAUSED
        if self.config.any_channel_enabled:
            return MotionState.ANIMATING
        return MotionState.READY

    # ---- ライフサイクル -------------------------------------------------------
    def activate(self) -> BaselineState | None:
        """基準値を捕捉する（初回のみ）。2 回目以降は初回の基準値を返す。"""
        if self._activated:
            return self._baseline
        self._activated = True
        if self.target is None:
            logger.debug("IdleMotion: no target; staying inert")
            return None
        self._baseline = capture_baseline(
            self.target, force_center_pivot=self.config.force_center_pivot
        )
        logger.debug("IdleMotion: baseline captured %s", self._baseline)
        return self._baseline

    # シーン構築完了通知（ホストから 1 度呼ばれる想定）
    on_ready = activate

    def pause(self) -> None:
        self.config.paused = True

    def resume(self) -> None:
        self.config.paused = False

    # ---- 更新 ---------------------------------------------------------------
    def tick(self, dt: float) -> None:
        """経過時間を `dt` 秒進め、有効なチャンネルへオフセットを適用する。"""
        if not self.is_processing:
            return
        base = self._baseline
        assert base is not None
        cfg = self.config
        target = self.target
        self.time_elapsed += float(dt)
        t = self.time_elapsed

        if cfg.animate_position:
            ox, oy = sine_offset2(cfg.position_amplitude, cfg.position_frequency, t)
            target.position = (base.position[0] + ox, base.position[1] + oy)

        if cfg.animate_rotation:
            target.rotation_degrees = base.rotation + sine_offset(
                cfg.rotation_amplitude, cfg.rotation_frequency, t
            )

        if cfg.animate_scale:
            ox, oy = sine_offset2(cfg.scale_amplitude, cfg.scale_frequency, t)
            target.scale = (base.scale[0] + ox, base.scale[1] + oy)

    def reset(self) -> None:
        """ターゲットの変換を基準値へ上書きする。経過時間は変えない。"""
        if not self.is_active:
            return
        base = self._baseline
        assert base is not None
        self.target.position = base.position
        self.target.rotation_degrees = base.rotation
        self.target.scale = base.scale
        logger.debug("IdleMotion: reset to baseline (t=%.3f)", self.time_elapsed)


__all__ = ["IdleMotion", "MotionState"]
