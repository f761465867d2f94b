"""系统适配器基类。

每个游戏系统一个 :class:`SystemAdapter` 子类，覆盖需要特殊处理的查询；
未覆盖的查询沿用这里的默认行为：

- 追踪属性：类属性 ``attributes`` 中声明的条目（默认为空）。
- 描述：None。
- 先攻显示：战斗者原始先攻值 + d20 图标。
- 状态图标：空列表。

未注册的系统直接使用基类实例，因此默认行为也就是“未知系统”的行为。
"""

from __future__ import annotations

from dataclasses import dataclass

from combatdock.host.protocols import Actor, Combatant, HostContext, Localizer
from combatdock.models import AttributeDescriptor, IconDescriptor, InitiativeDisplay
from combatdock.types import GameSystem


@dataclass(frozen=True)
class AttributeSpec:
    """追踪属性表中的一行。

    ``localize`` 为 True 时 ``unit`` 是本地化键名，在查询时解析。
    """

    path: str
    icon: str
    unit: str = ""
    localize: bool = False

    def resolve(self, localizer: Localizer) -> AttributeDescriptor:
        unit = localizer.localize(self.unit) if self.localize and self.unit else self.unit
        return AttributeDescriptor(path=self.path, icon=self.icon, unit=unit)


class SystemAdapter:
    """默认适配器，同时也是各系统适配器的基类。"""

    system: GameSystem | None = None
    attributes: tuple[AttributeSpec, ...] = ()

    @property
    def system_id(self) -> str | None:
        return self.system.value if self.system is not None else None

    def tracked_attributes(self, ctx: HostContext) -> list[AttributeDescriptor]:
        """按声明顺序返回本系统的追踪属性。"""
        return [spec.resolve(ctx.localizer) for spec in self.attributes]

    def describe(self, actor: Actor, ctx: HostContext) -> str | None:
        """生成 actor 的一行描述，无可用描述时返回 None。"""
        return None

    def initiative(self, combatant: Combatant | None, ctx: HostContext) -> InitiativeDisplay:
        """先攻值的渲染方式。"""
        return InitiativeDisplay(value=getattr(combatant, "initiative", None))

    def icons(self, combatant: Combatant, ctx: HostContext) -> list[IconDescriptor]:
        """战斗者旁显示的状态图标。"""
        return []

    def reset_turn(self, combatant: Combatant, ctx: HostContext) -> None:
        """新回合开始时重置每回合状态。默认没有需要重置的内容。"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(system={self.system_id!r})"
