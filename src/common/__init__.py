"""
どこで: `common` パッケージ。
何を: 型エイリアス・正弦波オフセット・環境変数設定など、各層で使う軽量ユーティリティ。
なぜ: motion/engine/api から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .types import Vec2, as_vec2
from .wave import sine_offset, sine_offset2

__all__ = [
    "Vec2",
    "as_vec2",
    "sine_offset",
    "sine_offset2",
]
