"""插件对宿主暴露的查询入口。

宿主 / UI 层只调用这里的函数；每个函数都按 ``ctx.system_id`` 分派到
对应的系统适配器，未知系统落到默认行为，不会抛出异常。

使用方式::

    from combatdock.api import configure, get_initiative_display
    from combatdock.host.protocols import HostContext

    config = configure("combatdock.yaml")
    ctx = HostContext(system_id="swade", config=config, cards=..., settings=...)
    display = get_initiative_display(combatant, ctx)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from combatdock.host.protocols import Actor, Combatant, HostContext
from combatdock.infra.config import ConfigManager, DockConfig
from combatdock.infra.logger import setup_logger
from combatdock.models import IconDescriptor, InitiativeDisplay
from combatdock.systems import get_adapter


def configure(path: str | Path, overrides: dict[str, Any] | None = None) -> DockConfig:
    """加载插件配置并按其中的日志设置初始化 logger。"""
    config = ConfigManager.load(path, overrides)
    log = config.log
    setup_logger(
        log_dir=log.dir if log.to_file else None,
        level=log.level,
        rotation=log.rotation,
        retention=log.retention,
    )
    return config


def generate_description(actor: Actor, ctx: HostContext) -> str | None:
    """Tooltip 中 actor 名字下方的一行描述；无可用描述时返回 None。"""
    return get_adapter(ctx.system_id).describe(actor, ctx)


def get_initiative_display(combatant: Combatant | None, ctx: HostContext) -> InitiativeDisplay:
    """先攻值、先攻图标（图标类名或图片）与掷骰按钮图标。"""
    return get_adapter(ctx.system_id).initiative(combatant, ctx)


def get_system_icons(combatant: Combatant, ctx: HostContext) -> list[IconDescriptor]:
    """战斗者旁的状态切换图标，按显示顺序排列。"""
    return get_adapter(ctx.system_id).icons(combatant, ctx)


def reset_action_flags(combatant: Combatant, ctx: HostContext) -> None:
    """新回合开始时把每回合状态恢复为可用。"""
    get_adapter(ctx.system_id).reset_turn(combatant, ctx)
