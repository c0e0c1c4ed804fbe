"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Preview runner
    PREVIEW_FPS: int = 60
    PREVIEW_SHOW_BASELINE: bool = False
    CONFIG_PATH: str | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int`、str は `env_str` を使用。
    - FPS は下限 1 に丸める。
    """
    _settings.LOG_LEVEL = (env_str("PXI_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.PREVIEW_FPS = env_int("PXI_PREVIEW_FPS", 60, min_value=1) or 60
    _settings.PREVIEW_SHOW_BASELINE = env_bool("PXI_PREVIEW_SHOW_BASELINE", False)
    _settings.CONFIG_PATH = env_str("PXI_CONFIG_PATH", None)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
