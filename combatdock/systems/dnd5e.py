"""D&D 第五版 (dnd5e) 适配器。"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from combatdock.host.protocols import Actor, Combatant, HostContext, get_property
from combatdock.models import IconDescriptor, ToggleFlag
from combatdock.systems.base import AttributeSpec, SystemAdapter
from combatdock.types import UNAVAILABLE_COLOR, ActionSlot, GameSystem


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_cr(cr: float | None) -> str:
    """挑战等级文本：≥1 显示整数，<1 显示分数 ``1/n``。

    CR 为 0 或缺失时显示 ``"0"``。

    >>> format_cr(0.25)
    '1/4'
    """
    if cr is None or cr <= 0:
        return "0"
    if cr >= 1:
        return _format_number(cr)
    return f"1/{_format_number(1 / cr)}"


class Dnd5eAdapter(SystemAdapter):
    """dnd5e: CR / 等级描述，动作 / 附赠动作 / 反应三个切换图标。"""

    system = GameSystem.dnd5e
    attributes = (
        AttributeSpec("attributes.hp.value", "fas fa-heart", "HP"),
        AttributeSpec("attributes.ac.value", "fas fa-shield", "AC"),
        AttributeSpec("attributes.movement.walk", "fas fa-person-running-fast", "ft."),
        AttributeSpec("attributes.spelldc", "fas fa-hand-holding-magic", "Spell DC"),
        AttributeSpec("resources.legact.value", "far fa-bolt-lightning"),
        AttributeSpec("resources.legres.value", "fas fa-shield-cross"),
        AttributeSpec("resources.lair.value", "fa-solid fa-dungeon"),
    )

    # ── 描述 ──

    def describe(self, actor: Actor, ctx: HostContext) -> str | None:
        match actor.type:
            case "npc":
                return self._describe_npc(actor, ctx)
            case "character":
                return self._describe_character(actor)
            case _:
                return None

    def _describe_npc(self, actor: Actor, ctx: HostContext) -> str:
        cr = format_cr(get_property(actor.system, "details.cr"))
        creature_type = ctx.localize(self._creature_type_label(actor, ctx))
        return f"CR {cr} {creature_type}".rstrip()

    @staticmethod
    def _creature_type_label(actor: Actor, ctx: HostContext) -> str:
        """标签表优先，表中没有时回退到自定义类型文本。"""
        type_value = get_property(actor.system, "details.type.value")
        label = ctx.type_labels.label_for(type_value) if type_value else None
        if label is None:
            label = get_property(actor.system, "details.type.custom") or ""
        return label

    @staticmethod
    def _describe_character(actor: Actor) -> str:
        classes: Any = getattr(actor, "classes", None) or ()
        if isinstance(classes, Mapping):
            classes = classes.values()
        names = " / ".join(c if isinstance(c, str) else str(get_property(c, "name", "")) for c in classes)
        level = get_property(actor.system, "details.level")
        race = get_property(actor.system, "details.race")
        return f"Level {level} {names} ({race})"

    # ── 状态图标 ──

    def icons(self, combatant: Combatant, ctx: HostContext) -> list[IconDescriptor]:
        enabled = bool(getattr(combatant, "is_owner", False))
        icons = []
        for slot in ActionSlot:
            toggle = ToggleFlag(scope=ctx.config.module_id, key=slot.value)
            available = toggle.read(combatant)
            icons.append(
                IconDescriptor(
                    icon=slot.icon,
                    color=slot.color if available else UNAVAILABLE_COLOR,
                    enabled=enabled,
                    callback=toggle.bind(combatant),
                    toggle=toggle,
                )
            )
        return icons

    def reset_turn(self, combatant: Combatant, ctx: HostContext) -> None:
        for slot in ActionSlot:
            ToggleFlag(scope=ctx.config.module_id, key=slot.value).write(combatant, True)
        logger.debug("已重置动作标记: {}", ", ".join(s.value for s in ActionSlot))
