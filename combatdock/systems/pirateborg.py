"""Pirate Borg 适配器。"""

from __future__ import annotations

from combatdock.host.protocols import Actor, HostContext
from combatdock.systems.base import AttributeSpec, SystemAdapter
from combatdock.types import GameSystem


class PirateborgAdapter(SystemAdapter):
    system = GameSystem.pirateborg
    attributes = (
        AttributeSpec("attributes.hp.value", "fas fa-heart", "HP"),
        AttributeSpec("attributes.luck.value", "fas fa-clover", "Devil's Luck"),
        AttributeSpec("attributes.rituals.value", "fas fa-ankh", "Rituals"),
    )

    def describe(self, actor: Actor, ctx: HostContext) -> str | None:
        match actor.type:
            case "character":
                return "Character"
            case "creature":
                return "Creature"
            case "vehicle" | "vehicle_npc":
                return "Ship"
            case _:
                return None
