import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from motion.config import AnimationConfig

logger = logging.getLogger(__name__)

MOTION_SECTION = "idle_motion"


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.debug("failed to load %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/` 配下から呼ばれることを想定し、上位に `.git` や `pyproject.toml`、`configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/utils.py -> <repo>
    return cur.parent.parent


def load_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    if project_root is None:
        project_root = _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def load_motion_config(path: Optional[Union[str, Path]] = None) -> AnimationConfig:
    """`idle_motion` セクションから `AnimationConfig` を構築する。

    - `path` 指定時はその YAML のみを読む。未指定時は `load_config()` の結果を使う。
    - セクションが無ければ既定値。キー/値の誤りは `AnimationConfig.from_mapping` の例外をそのまま送出。
    """
    if path is not None:
        cfg = _safe_load_yaml(Path(path))
    else:
        cfg = load_config()
    section = cfg.get(MOTION_SECTION)
    if section is None:
        return AnimationConfig()
    return AnimationConfig.from_mapping(section)
