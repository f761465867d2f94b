"""combatdock 异常层级体系。

层级树::

    CombatDockError
    ├── ConfigError
    ├── UnsupportedSystemError
    └── HostError
        └── FlagStoreError
"""

from __future__ import annotations


# ── 基类 ──


class CombatDockError(Exception):
    """所有 combatdock 异常的基类。"""


# ── 基础设施异常 ──


class ConfigError(CombatDockError):
    """配置错误（文件无法解析、字段非法等）。"""

    def __init__(self, path: str = "", reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"配置无效: {path}" if path else "配置无效"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


# ── 游戏系统异常 ──


class UnsupportedSystemError(CombatDockError):
    """严格模式下查询了未注册的游戏系统。"""

    def __init__(self, system_id: str | None, supported: list[str] | None = None) -> None:
        self.system_id = system_id
        self.supported = supported or []
        names = ", ".join(self.supported)
        super().__init__(f"不支持的游戏系统 '{system_id}'。 支持: [{names}]")


# ── 宿主协作方异常 ──


class HostError(CombatDockError):
    """宿主注入的协作对象调用失败。"""


class FlagStoreError(HostError):
    """战斗者 flag 读写失败。"""

    def __init__(self, scope: str, key: str, reason: str = "") -> None:
        self.scope = scope
        self.key = key
        msg = f"flag 读写失败: {scope}.{key}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
