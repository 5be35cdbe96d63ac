"""
どこで: `util.utils`。
何を: YAML 構成ファイルの読み込み（フェイルソフト）とセクション取得ヘルパ。
なぜ: ウィンドウ/HUD/シーン配色の既定値をコード外で調整できるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config load failed: %s (%s)", path, e)
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


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def config_section(cfg: Dict[str, Any] | None, *keys: str) -> Dict[str, Any]:
    """ネストしたセクションを辿って辞書を返す。途中が欠落/非辞書なら空辞書。"""
    cur: Any = cfg or {}
    for k in keys:
        if not isinstance(cur, dict):
            return {}
        cur = cur.get(k, {})
    return cur if isinstance(cur, dict) else {}


__all__ = ["load_config", "config_section"]
