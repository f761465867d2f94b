"""查询结果数据类。

这些对象都是一次性的视图模型，宿主据此渲染，不做持久化。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from loguru import logger

from combatdock.host.protocols import Combatant
from combatdock.infra.exceptions import FlagStoreError


# ═══════════════════════════════════════════════════════════════════════════════
# 追踪属性
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class AttributeDescriptor:
    """一条追踪属性的显示配置。

    Attributes
    ----------
    path:
        ``actor.system`` 下的点分路径，如 ``attributes.hp.value``。
    icon:
        图标类名。
    unit:
        单位标签（已完成本地化）。
    """

    path: str
    icon: str
    unit: str = ""

    def to_dict(self) -> dict[str, str]:
        """宿主使用的键名: ``attr`` / ``icon`` / ``units``。"""
        return {"attr": self.path, "icon": self.icon, "units": self.unit}


# ═══════════════════════════════════════════════════════════════════════════════
# 先攻显示
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_INITIATIVE_ICON = "far fa-dice-d20"


@dataclass(frozen=True)
class InitiativeDisplay:
    """先攻值的渲染方式。

    ``icon`` 既可以是图标类名，也可以是图片路径。
    """

    value: Any = None
    icon: str = DEFAULT_INITIATIVE_ICON
    roll_icon: str = DEFAULT_INITIATIVE_ICON

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "icon": self.icon, "rollIcon": self.roll_icon}


# ═══════════════════════════════════════════════════════════════════════════════
# 状态图标
# ═══════════════════════════════════════════════════════════════════════════════

IconCallback = Callable[..., None]
"""图标点击回调: ``(event, combatant, icon_index, icon_id) → None``"""


@dataclass(frozen=True)
class ToggleFlag:
    """翻转战斗者某个布尔 flag 的命令。

    未设置的 flag 视为 *default*；每次执行只写 ``scope.key`` 这一个键。
    """

    scope: str
    key: str
    default: bool = True

    def read(self, combatant: Combatant) -> bool:
        value = combatant.get_flag(self.scope, self.key)
        return self.default if value is None else bool(value)

    def write(self, combatant: Combatant, value: bool) -> None:
        """写入 ``scope.key``。

        Raises
        ------
        FlagStoreError
            宿主拒绝写入（当前用户不是战斗者的所有者）。
        """
        try:
            combatant.set_flag(self.scope, self.key, value)
        except PermissionError as e:
            raise FlagStoreError(self.scope, self.key, reason=str(e)) from e
        logger.debug("flag {}.{} → {}", self.scope, self.key, value)

    def apply(self, combatant: Combatant) -> bool:
        """执行翻转，返回写入的新值。"""
        new_value = not self.read(combatant)
        self.write(combatant, new_value)
        return new_value

    def bind(self, combatant: Combatant) -> IconCallback:
        """生成宿主回调。宿主传入的 combatant 优先于绑定的 combatant。"""

        def _callback(
            event: Any = None,
            target: Combatant | None = None,
            icon_index: int | None = None,
            icon_id: str | None = None,
        ) -> None:
            self.apply(target if target is not None else combatant)

        return _callback


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


@dataclass
class IconDescriptor:
    """一个可点击的状态图标。

    Attributes
    ----------
    icon:
        图标类名。
    color:
        当前颜色。
    enabled:
        当前用户是否可以点击。
    callback:
        点击回调，由宿主在用户交互时调用。
    toggle:
        回调背后的 flag 翻转命令；纯展示图标为 None。
    id:
        可选的元素 id。
    font_size:
        可选的字号，如 ``"1rem"``。
    """

    icon: str
    color: str
    enabled: bool = True
    callback: IconCallback = field(default=_noop, repr=False, compare=False)
    toggle: ToggleFlag | None = None
    id: str | None = None
    font_size: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "icon": self.icon,
            "color": self.color,
            "enabled": self.enabled,
            "callback": self.callback,
        }
        if self.id is not None:
            data["id"] = self.id
        if self.font_size is not None:
            data["fontSize"] = self.font_size
        return data
