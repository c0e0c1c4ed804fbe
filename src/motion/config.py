"""
どこで: `motion.config`
何を: アイドルモーションの設定 `AnimationConfig`（チャンネル有効/振幅/周波数/ピボット/一時停止）。
なぜ: エディタ的なプロパティ面と実行時ノブを 1 つの素朴な構造体にまとめ、毎 tick 読み直すため。

補足:
- 振幅/周波数は検証しない。0 は無振動、負値は位相反転としてそのまま使う。
- 型/形状の誤り（3 要素ベクトル、文字列など）は構築時・代入時に `ValueError`/`TypeError`。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from common.types import Vec2, as_vec2

_VECTOR_FIELDS = ("position_amplitude", "scale_amplitude")
_FLOAT_FIELDS = (
    "rotation_amplitude",
    "position_frequency",
    "rotation_frequency",
    "scale_frequency",
)
_BOOL_FIELDS = (
    "animate_position",
    "animate_rotation",
    "animate_scale",
    "force_center_pivot",
    "paused",
)


@dataclass
class AnimationConfig:
    """アイドルモーション設定（実行中の変更可）。"""

    animate_position: bool = True
    animate_rotation: bool = False
    animate_scale: bool = False

    position_amplitude: Vec2 = (0.0, 4.0)  # [px]
    rotation_amplitude: float = 2.0  # [deg]
    scale_amplitude: Vec2 = (0.02, 0.02)

    position_frequency: float = 0.5  # [Hz]
    rotation_frequency: float = 0.25
    scale_frequency: float = 0.5

    force_center_pivot: bool = True
    paused: bool = False

    # 構築時・実行中の代入とも正規化する
    def __setattr__(self, name: str, value: Any) -> None:
        if name in _VECTOR_FIELDS:
            value = as_vec2(value, name=name)
        elif name in _FLOAT_FIELDS:
            value = _as_float(value, name)
        elif name in _BOOL_FIELDS:
            value = _as_bool(value, name)
        object.__setattr__(self, name, value)

    @property
    def any_channel_enabled(self) -> bool:
        return self.animate_position or self.animate_rotation or self.animate_scale

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "AnimationConfig":
        """辞書（YAML 由来など）から構築する。未知キーは `ValueError`。"""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"設定は mapping である必要がある: {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"未知の設定キー: {', '.join(map(str, unknown))}")
        return cls(**dict(data))

    def to_dict(self) -> dict[str, Any]:
        """プレーンな辞書へ変換する（ベクトルは list）。"""
        out = asdict(self)
        for name in _VECTOR_FIELDS:
            out[name] = list(out[name])
        return out


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} は数値である必要がある: {value!r}")
    return float(value)


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} は bool である必要がある: {value!r}")
    return value


__all__ = ["AnimationConfig"]
