"""配置 / 语言文件读取工具。

配置文件与宿主语言文件都以映射为根（JSON 是 YAML 的子集，共用同一个解析器）。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError


def load_yaml(path: str | Path) -> dict[str, Any]:
    """读取以映射为根的 YAML / JSON 文件。

    Parameters
    ----------
    path:
        文件路径。

    Returns
    -------
    dict[str, Any]
        解析结果，空文件返回 ``{}``。

    Raises
    ------
    FileNotFoundError
        文件不存在。
    ConfigError
        语法错误，或根节点不是映射（列表、标量）。
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"文件不存在: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(str(path), reason=str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(str(path), reason=f"根节点必须是映射，实际为 {type(data).__name__}")
    return data


def merge_dicts(base: dict, override: dict) -> dict:
    """把宿主运行时设置深度合并到文件配置上，*override* 优先。

    只有两侧都是映射的键会递归合并；列表（如某个系统的追踪属性表）整体替换。
    返回新字典，不修改入参。
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
