"""
どこで: `common` の型定義。
何を: Vec2 などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

Vec2 = tuple[float, float]


def as_vec2(value: object, *, name: str = "value") -> Vec2:
    """スカラーまたは 2 要素シーケンスを `Vec2` に正規化する。

    - スカラーは両成分へブロードキャストする。
    - 要素数が 2 でない場合は `ValueError`、数値でない場合は `TypeError`。
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} は数値である必要がある: {value!r}")
    if isinstance(value, (int, float)):
        v = float(value)
        return (v, v)
    if isinstance(value, (str, bytes)):
        raise TypeError(f"{name} は数値である必要がある: {value!r}")
    try:
        items = list(value)  # type: ignore[call-overload]
    except TypeError:
        raise TypeError(f"{name} は数値または 2 要素シーケンスである必要がある: {value!r}")
    if len(items) != 2:
        raise ValueError(f"{name} は 2 要素が必要（受領: {len(items)} 要素）")
    out = []
    for it in items:
        if isinstance(it, bool) or not isinstance(it, (int, float)):
            raise TypeError(f"{name} の成分は数値である必要がある: {it!r}")
        out.append(float(it))
    return (out[0], out[1])


__all__ = ["Vec2", "as_vec2"]
