"""游戏系统适配器注册表。

模块组成::

    systems/
    ├── base.py        # SystemAdapter 默认行为 + AttributeSpec
    ├── dnd5e.py
    ├── cyberpunk.py
    ├── swade.py
    └── pirateborg.py

典型使用::

    from combatdock.systems import get_adapter

    adapter = get_adapter("swade")
    adapter.initiative(combatant, ctx)
"""

from __future__ import annotations

from loguru import logger

from combatdock.infra.exceptions import UnsupportedSystemError

from .base import AttributeSpec, SystemAdapter
from .cyberpunk import CyberpunkRedAdapter
from .dnd5e import Dnd5eAdapter, format_cr
from .pirateborg import PirateborgAdapter
from .swade import SwadeAdapter

DEFAULT_ADAPTER = SystemAdapter()
"""未注册系统使用的默认适配器。"""

_ADAPTERS: dict[str, SystemAdapter] = {}


def register(adapter: SystemAdapter) -> SystemAdapter:
    """注册适配器。同一系统重复注册时后者覆盖前者。"""
    if adapter.system_id is None:
        raise ValueError(f"{adapter!r} 没有设置 system，无法注册")
    if adapter.system_id in _ADAPTERS:
        logger.warning("系统 {} 的适配器被覆盖: {}", adapter.system_id, adapter)
    _ADAPTERS[adapter.system_id] = adapter
    return adapter


def get_adapter(system_id: str | None, strict: bool = False) -> SystemAdapter:
    """按系统 id 查找适配器。

    Parameters
    ----------
    system_id:
        宿主当前的游戏系统 id。
    strict:
        为 True 时未注册的系统抛出 :class:`UnsupportedSystemError`，
        否则返回 :data:`DEFAULT_ADAPTER`。
    """
    adapter = _ADAPTERS.get(system_id) if system_id is not None else None
    if adapter is not None:
        return adapter
    if strict:
        raise UnsupportedSystemError(system_id, supported_systems())
    logger.debug("系统 {} 未注册，使用默认适配器", system_id)
    return DEFAULT_ADAPTER


def supported_systems() -> list[str]:
    """已注册的系统 id，按注册顺序。"""
    return list(_ADAPTERS)


for _adapter in (Dnd5eAdapter(), CyberpunkRedAdapter(), SwadeAdapter(), PirateborgAdapter()):
    register(_adapter)


__all__ = [
    "AttributeSpec",
    "CyberpunkRedAdapter",
    "DEFAULT_ADAPTER",
    "Dnd5eAdapter",
    "PirateborgAdapter",
    "SwadeAdapter",
    "SystemAdapter",
    "format_cr",
    "get_adapter",
    "register",
    "supported_systems",
]
