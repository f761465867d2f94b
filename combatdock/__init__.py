"""combatdock：战斗追踪器插件的游戏系统适配层。

包组成::

    combatdock/
    ├── types.py        # 枚举：游戏系统、动作槽位、花色
    ├── models.py       # 查询结果数据类
    ├── attributes.py   # 追踪属性查询
    ├── api.py          # 对宿主暴露的查询入口
    ├── host/           # 宿主协作方 Protocol 与内存实现
    ├── systems/        # 各游戏系统适配器
    └── infra/          # 日志、配置、异常、文件工具
"""

from .api import (
    configure,
    generate_description,
    get_initiative_display,
    get_system_icons,
    reset_action_flags,
)
from .attributes import default_attributes_config, read_tracked_attributes, tracked_attributes
from .host.protocols import HostContext
from .models import AttributeDescriptor, IconDescriptor, InitiativeDisplay, ToggleFlag
from .types import ActionSlot, CardSuit, GameSystem

__all__ = [
    "ActionSlot",
    "AttributeDescriptor",
    "CardSuit",
    "GameSystem",
    "HostContext",
    "IconDescriptor",
    "InitiativeDisplay",
    "ToggleFlag",
    "configure",
    "default_attributes_config",
    "generate_description",
    "get_initiative_display",
    "get_system_icons",
    "read_tracked_attributes",
    "reset_action_flags",
    "tracked_attributes",
]
