"""
どこで: `api.runner`
何を: ノードへ `IdleMotion` を取り付けて FrameClock で駆動するヘルパと、pyglet プレビュー。
なぜ: 「構築 → 1 ステップ遅延で ready → 毎フレーム tick」というホスト側の段取りを
      一箇所にまとめ、スクリプトからもテストからも同じ経路で使えるようにするため。

Notes
-----
- `run_preview` は `pyglet` を遅延インポートする（ヘッドレス環境では `init_only=True` を使う）。
- 初期化エラーやフォールバックは `logging` で通知。必要に応じてハンドラを設定すること。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from common import settings
from common.logging import setup_default_logging
from engine.core.frame_clock import FrameClock
from engine.core.node import CanvasNode
from motion.baseline import BaselineState
from motion.config import AnimationConfig
from motion.idle import IdleMotion
from util.utils import load_motion_config

logger = logging.getLogger(__name__)


def attach(
    node: CanvasNode | None,
    config: AnimationConfig | None = None,
    *,
    clock: FrameClock | None = None,
) -> tuple[IdleMotion, FrameClock]:
    """`node` に `IdleMotion` を取り付けて `clock` へ登録する。

    基準値の捕捉（`on_ready`）は `clock.call_deferred` で次フレーム先頭へ遅延させる。
    これによりホストがレイアウト（サイズ）を確定させた後に捕捉される。
    """
    motion = IdleMotion(node, config)
    if clock is None:
        clock = FrameClock()
    clock.add(motion)
    clock.call_deferred(motion.on_ready)
    return motion, clock


def drive(clock: FrameClock, frames: int, dt: float) -> None:
    """ウィンドウ無しで `frames` 回 `clock.tick(dt)` を呼ぶ。"""
    for _ in range(max(0, int(frames))):
        clock.tick(dt)


def baseline_node(node: CanvasNode, baseline: BaselineState) -> CanvasNode:
    """`node` と同じサイズ/ピボットで、変換を基準値にしたノードを返す。"""
    return CanvasNode(
        node.size,
        position=baseline.position,
        rotation_degrees=baseline.rotation,
        scale=baseline.scale,
        pivot_offset=node.pivot_offset,
        name=f"{node.name}.baseline",
    )


def resolve_config(
    config: AnimationConfig | str | Path | None,
) -> AnimationConfig:
    """設定の解決順: 明示オブジェクト > 明示パス > `PXI_CONFIG_PATH` > configs/。"""
    if isinstance(config, AnimationConfig):
        return config
    if config is not None:
        return load_motion_config(config)
    env_path = settings.get().CONFIG_PATH
    if env_path:
        return load_motion_config(env_path)
    return load_motion_config()


def run_preview(
    config: AnimationConfig | str | Path | None = None,
    *,
    size: Sequence[float] = (160.0, 120.0),
    window_size: tuple[int, int] = (480, 360),
    fps: int | None = None,
    init_only: bool = False,
) -> IdleMotion:
    """矩形ノードにアイドルモーションを付けて pyglet ウィンドウに表示する。

    Parameters
    ----------
    config : AnimationConfig | str | Path | None
        設定オブジェクトまたは YAML パス。None で `PXI_CONFIG_PATH`/configs から解決。
    size : (w, h)
        矩形サイズ [px]。ウィンドウ中央に配置する。
    window_size : (w, h)
        ウィンドウサイズ [px]。
    fps : int | None
        更新レート。None で `PXI_PREVIEW_FPS`。1 以上にクランプ。
    init_only : bool, default False
        True ならウィンドウを作らずに構築済みの `IdleMotion` を返す。

    Returns
    -------
    IdleMotion
        取り付けたモーション。
    """
    setup_default_logging()
    cfg = resolve_config(config)
    st = settings.get()
    fps = max(1, int(fps if fps is not None else st.PREVIEW_FPS))

    w, h = float(size[0]), float(size[1])
    win_w, win_h = int(window_size[0]), int(window_size[1])
    node = CanvasNode(
        (w, h), position=((win_w - w) * 0.5, (win_h - h) * 0.5), name="preview"
    )
    motion, clock = attach(node, cfg)

    if init_only:
        return motion

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from engine.core.render_window import RenderWindow

    window = RenderWindow(win_w, win_h, bg_color=(0.96, 0.96, 0.94, 1.0))

    def draw_node() -> None:
        batch = pyglet.graphics.Batch()
        keep = []
        if st.PREVIEW_SHOW_BASELINE and motion.baseline is not None:
            ghost = [tuple(p) for p in baseline_node(node, motion.baseline).corners()]
            keep.append(pyglet.shapes.Polygon(*ghost, color=(200, 200, 200, 255), batch=batch))
        corners = [tuple(p) for p in node.corners()]
        keep.append(pyglet.shapes.Polygon(*corners, color=(40, 90, 160, 255), batch=batch))
        batch.draw()

    window.add_draw_callback(draw_node)
    pyglet.clock.schedule_interval(clock.tick, 1 / fps)
    logger.info("preview started: fps=%d size=%s", fps, (w, h))
    pyglet.app.run()
    return motion


__all__ = ["attach", "baseline_node", "drive", "resolve_config", "run_preview"]
