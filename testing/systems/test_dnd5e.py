"""dnd5e 适配器测试。"""

from __future__ import annotations

import pytest

from combatdock.api import generate_description, get_system_icons, reset_action_flags
from combatdock.host.memory import MemoryActor, MemoryCombatant
from combatdock.infra.config import DockConfig
from combatdock.infra.exceptions import FlagStoreError
from combatdock.systems.dnd5e import format_cr
from combatdock.types import UNAVAILABLE_COLOR, ActionSlot


def _npc(cr, type_value="dragon", custom=""):
    return MemoryActor(
        type="npc",
        system={"details": {"cr": cr, "type": {"value": type_value, "custom": custom}}},
    )


# ═══════════════════════════════════════════════════════════════════════════════
# CR 格式化
# ═══════════════════════════════════════════════════════════════════════════════


class TestFormatCr:
    @pytest.mark.parametrize(
        "cr, expected",
        [
            (5, "5"),
            (1, "1"),
            (30, "30"),
            (0.5, "1/2"),
            (0.25, "1/4"),
            (0.125, "1/8"),
            (2.0, "2"),
        ],
    )
    def test_values(self, cr, expected):
        assert format_cr(cr) == expected

    def test_zero(self):
        assert format_cr(0) == "0"

    def test_missing(self):
        assert format_cr(None) == "0"


# ═══════════════════════════════════════════════════════════════════════════════
# 描述
# ═══════════════════════════════════════════════════════════════════════════════


class TestDescribeNpc:
    def test_integer_cr(self, make_ctx):
        assert generate_description(_npc(5), make_ctx("dnd5e")) == "CR 5 Dragon"

    def test_fraction_cr(self, make_ctx):
        ctx = make_ctx("dnd5e")
        assert generate_description(_npc(0.5), ctx) == "CR 1/2 Dragon"
        assert generate_description(_npc(0.25, "undead"), ctx) == "CR 1/4 Undead"

    def test_custom_type_fallback(self, make_ctx):
        """标签表中没有的类型使用自定义文本。"""
        actor = _npc(3, type_value="custom", custom="Swarm of Crabs")
        assert generate_description(actor, make_ctx("dnd5e")) == "CR 3 Swarm of Crabs"

    def test_empty_type_value_uses_custom(self, make_ctx):
        actor = _npc(1, type_value="", custom="Thing")
        assert generate_description(actor, make_ctx("dnd5e")) == "CR 1 Thing"

    def test_no_type_at_all(self, make_ctx):
        actor = MemoryActor(type="npc", system={"details": {"cr": 2}})
        assert generate_description(actor, make_ctx("dnd5e")) == "CR 2"

    def test_zero_cr(self, make_ctx):
        assert generate_description(_npc(0), make_ctx("dnd5e")) == "CR 0 Dragon"


class TestDescribeCharacter:
    def test_multiclass(self, make_ctx):
        actor = MemoryActor(
            type="character",
            system={"details": {"level": 5, "race": "Elf"}},
            classes={"fighter": {"name": "Fighter"}, "wizard": {"name": "Wizard"}},
        )
        assert generate_description(actor, make_ctx("dnd5e")) == "Level 5 Fighter / Wizard (Elf)"

    def test_single_class(self, make_ctx):
        actor = MemoryActor(
            type="character",
            system={"details": {"level": 1, "race": "Human"}},
            classes={"rogue": {"name": "Rogue"}},
        )
        assert generate_description(actor, make_ctx("dnd5e")) == "Level 1 Rogue (Human)"

    def test_class_name_list(self, make_ctx):
        actor = MemoryActor(
            type="character",
            system={"details": {"level": 5, "race": "Elf"}},
            classes=["Fighter", "Wizard"],
        )
        assert generate_description(actor, make_ctx("dnd5e")) == "Level 5 Fighter / Wizard (Elf)"

    def test_class_item_list(self, make_ctx):
        actor = MemoryActor(
            type="character",
            system={"details": {"level": 3, "race": "Dwarf"}},
            classes=[{"name": "Cleric"}],
        )
        assert generate_description(actor, make_ctx("dnd5e")) == "Level 3 Cleric (Dwarf)"

    def test_other_type(self, make_ctx):
        actor = MemoryActor(type="vehicle")
        assert generate_description(actor, make_ctx("dnd5e")) is None


# ═══════════════════════════════════════════════════════════════════════════════
# 状态图标
# ═══════════════════════════════════════════════════════════════════════════════


class TestSystemIcons:
    def test_three_icons_in_order(self, make_ctx):
        icons = get_system_icons(MemoryCombatant(), make_ctx("dnd5e"))
        assert [i.icon for i in icons] == ["fas fa-circle", "fas fa-triangle", "fas fa-sparkle"]
        assert [i.color for i in icons] == ["green", "#ff9f4c", "#e16de1"]
        assert [i.toggle.key for i in icons] == ["action", "bonus", "reaction"]

    def test_enabled_follows_ownership(self, make_ctx):
        ctx = make_ctx("dnd5e")
        assert all(i.enabled for i in get_system_icons(MemoryCombatant(is_owner=True), ctx))
        assert not any(i.enabled for i in get_system_icons(MemoryCombatant(is_owner=False), ctx))

    def test_used_flag_is_gray(self, make_ctx):
        combatant = MemoryCombatant(flags={"combatdock": {"reaction": False}})
        icons = get_system_icons(combatant, make_ctx("dnd5e"))
        assert icons[2].color == UNAVAILABLE_COLOR
        assert icons[0].color == "green"

    def test_toggle_bonus_from_unset(self, make_ctx):
        ctx = make_ctx("dnd5e")
        combatant = MemoryCombatant()
        bonus = get_system_icons(combatant, ctx)[1]

        bonus.callback(None, combatant, 1, None)

        assert combatant.get_flag("combatdock", "bonus") is False
        assert combatant.get_flag("combatdock", "action") is None
        assert combatant.get_flag("combatdock", "reaction") is None
        colors = [i.color for i in get_system_icons(combatant, ctx)]
        assert colors == ["green", UNAVAILABLE_COLOR, "#e16de1"]

    def test_toggle_twice_restores(self, make_ctx):
        ctx = make_ctx("dnd5e")
        combatant = MemoryCombatant()
        action = get_system_icons(combatant, ctx)[0]
        action.callback()
        action.callback()
        assert combatant.get_flag("combatdock", "action") is True

    def test_callback_prefers_passed_combatant(self, make_ctx):
        ctx = make_ctx("dnd5e")
        bound = MemoryCombatant()
        other = MemoryCombatant()
        get_system_icons(bound, ctx)[2].callback(None, other, 2, None)
        assert other.get_flag("combatdock", "reaction") is False
        assert bound.get_flag("combatdock", "reaction") is None

    def test_custom_module_id_scope(self, make_ctx):
        ctx = make_ctx("dnd5e", config=DockConfig(module_id="my-dock"))
        combatant = MemoryCombatant()
        get_system_icons(combatant, ctx)[0].callback()
        assert combatant.get_flag("my-dock", "action") is False
        assert combatant.get_flag("combatdock", "action") is None

    def test_to_dict(self, make_ctx):
        data = get_system_icons(MemoryCombatant(), make_ctx("dnd5e"))[0].to_dict()
        assert set(data) == {"icon", "color", "enabled", "callback"}
        assert callable(data["callback"])

    def test_reset_action_flags(self, make_ctx):
        ctx = make_ctx("dnd5e")
        combatant = MemoryCombatant(
            flags={"combatdock": {slot.value: False for slot in ActionSlot}}
        )
        reset_action_flags(combatant, ctx)
        assert all(i.color != UNAVAILABLE_COLOR for i in get_system_icons(combatant, ctx))

    def test_reset_refused_write(self, make_ctx):
        """宿主拒绝写入时重置同样抛出 FlagStoreError。"""

        class ReadOnlyCombatant(MemoryCombatant):
            def set_flag(self, scope, key, value):
                raise PermissionError("not owner")

        with pytest.raises(FlagStoreError) as exc_info:
            reset_action_flags(ReadOnlyCombatant(), make_ctx("dnd5e"))
        assert exc_info.value.scope == "combatdock"
        assert exc_info.value.key == "action"
