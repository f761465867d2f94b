"""Cyberpunk RED 适配器。只声明追踪属性，其余查询使用默认行为。"""

from __future__ import annotations

from combatdock.systems.base import AttributeSpec, SystemAdapter
from combatdock.types import GameSystem


class CyberpunkRedAdapter(SystemAdapter):
    system = GameSystem.cyberpunk_red
    attributes = (
        AttributeSpec("derivedStats.hp.value", "fas fa-heart", "HP"),
        AttributeSpec("derivedStats.walk.value", "fas fa-person-running", "m/ft"),
        AttributeSpec("derivedStats.run.value", "fas fa-person-running-fast", "m/ft"),
        AttributeSpec("externalData.currentArmorHead.value", "fas fa-helmet-safety", "SP"),
        AttributeSpec("externalData.currentArmorBody.value", "fas fa-shirt-tank-top", "SP"),
    )
