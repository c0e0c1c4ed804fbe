"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定・遅延呼び出し）。
なぜ: GUI/ループから呼び出すだけで複数コンポーネントの更新順を統一し、
      「シーン構築完了後の 1 ステップ遅延初期化」をエンジン非依存に表現するため。
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable, Sequence

from .tickable import Tickable

logger = logging.getLogger(__name__)


class FrameClock:
    """登録された Tickable を固定順序で実行する小さなクラス。

    - `call_deferred(fn)` で登録した関数は次回 `tick()` の先頭で 1 度だけ実行される。
    - 遅延呼び出し中に追加された関数は、さらに次の `tick()` へ回る。
    """

    def __init__(self, tickables: Sequence[Tickable] = ()):
        self._tickables: list[Tickable] = list(tickables)
        self._deferred: deque[Callable[[], object]] = deque()
        self._last_time = time.perf_counter()

    def add(self, tickable: Tickable) -> None:
        """Tickable を末尾に追加する。"""
        self._tickables.append(tickable)

    def remove(self, tickable: Tickable) -> None:
        """Tickable を取り除く（未登録なら何もしない）。"""
        try:
            self._tickables.remove(tickable)
        except ValueError:
            pass

    @property
    def tickables(self) -> tuple[Tickable, ...]:
        return tuple(self._tickables)

    def call_deferred(self, fn: Callable[[], object]) -> None:
        """`fn` を次回 `tick()` の先頭で実行するよう予約する。"""
        self._deferred.append(fn)

    @property
    def pending_calls(self) -> int:
        return len(self._deferred)

    def _flush_deferred(self) -> None:
        # 今回分のみ実行（実行中に積まれたものは次フレーム）
        for _ in range(len(self._deferred)):
            fn = self._deferred.popleft()
            logger.debug("deferred call: %r", fn)
            fn()

    # GUI フレームワークから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet は dt を渡してくれる
            now = time.perf_counter()  # 他フレームワーク用
            dt = now - self._last_time
            self._last_time = now

        self._flush_deferred()
        for t in tuple(self._tickables):
            t.tick(dt)


__all__ = ["FrameClock"]
