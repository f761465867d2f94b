"""追踪属性查询。

默认属性表由各系统适配器声明（见 ``systems/``），用户可以在配置的
``attributes`` 段按系统整表替换。
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from combatdock.host.protocols import Actor, HostContext, get_property
from combatdock.models import AttributeDescriptor
from combatdock.systems import AttributeSpec, get_adapter, supported_systems


def default_attributes_config(ctx: HostContext | None = None) -> dict[str, list[AttributeDescriptor]]:
    """所有受支持系统的默认追踪属性，键为系统 id，值按显示顺序排列。

    *ctx* 只用于解析需要本地化的单位；为 None 时单位保留本地化键名。
    """
    ctx = ctx or HostContext(system_id="")
    return {
        system_id: get_adapter(system_id).tracked_attributes(ctx)
        for system_id in supported_systems()
    }


def tracked_attributes(ctx: HostContext, system_id: str | None = None) -> list[AttributeDescriptor]:
    """某个系统实际生效的追踪属性（配置覆盖优先）。

    未知系统且没有配置覆盖时返回空列表。
    """
    system_id = ctx.system_id if system_id is None else system_id
    overrides = ctx.config.attributes.get(system_id)
    if overrides is not None:
        logger.debug("系统 {} 使用自定义追踪属性 ({} 项)", system_id, len(overrides))
        return [
            AttributeSpec(o.path, o.icon, o.unit, localize=o.localize).resolve(ctx.localizer)
            for o in overrides
        ]
    return get_adapter(system_id).tracked_attributes(ctx)


def read_tracked_attributes(actor: Actor, ctx: HostContext) -> list[tuple[AttributeDescriptor, Any]]:
    """读取 actor 在当前系统下每个追踪属性的值，路径不存在时值为 None。"""
    system_data = getattr(actor, "system", None)
    return [
        (descriptor, get_property(system_data, descriptor.path))
        for descriptor in tracked_attributes(ctx)
    ]
