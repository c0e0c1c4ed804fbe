import logging

from api import AnimationConfig, CanvasNode, attach, drive
from common.logging import setup_default_logging

if __name__ == "__main__":
    # ウィンドウ無しで 2 秒分進めて変換を確認
    setup_default_logging()
    logger = logging.getLogger(__name__)
    node = CanvasNode((64, 64), position=(100, 100))
    motion, clock = attach(node, AnimationConfig(animate_rotation=True))
    for _ in range(4):
        drive(clock, frames=30, dt=1 / 60)
        logger.info(
            "simple: t=%.2f position=%s rotation=%.3f",
            motion.time_elapsed,
            node.position,
            node.rotation_degrees,
        )
