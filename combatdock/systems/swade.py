"""Savage Worlds (swade) 适配器。

swade 的先攻不是数值，而是一张行动牌，牌面字符串形如 ``9♥``、``Red J``。
"""

from __future__ import annotations

from loguru import logger

from combatdock.host.protocols import Actor, Combatant, HostContext, get_property
from combatdock.models import InitiativeDisplay
from combatdock.systems.base import AttributeSpec, SystemAdapter
from combatdock.types import JOKER_CARDS, CardSuit, GameSystem

DRAW_CARD_ICON = "far fa-cards-blank"


class SwadeAdapter(SystemAdapter):
    """swade: 百搭 / 群演描述，行动牌先攻。"""

    system = GameSystem.swade
    attributes = (
        AttributeSpec("wounds.value", "fas fa-heart", "SWADE.Wounds", localize=True),
        AttributeSpec("fatigue.value", "fas fa-face-hand-yawn", "SWADE.Fatigue", localize=True),
        AttributeSpec("bennies.value", "fas fa-bullseye", "SWADE.Bennies", localize=True),
        AttributeSpec("stats.speed.value", "fas fa-person-running", "SWADE.Pace", localize=True),
        AttributeSpec("stats.parry.value", "fas fa-swords", "SWADE.Parry", localize=True),
        AttributeSpec("stats.toughness.value", "fas fa-shield", "SWADE.Tough", localize=True),
        AttributeSpec("stats.toughness.armor", "fas fa-helmet-battle", "SWADE.Armor", localize=True),
    )

    def describe(self, actor: Actor, ctx: HostContext) -> str | None:
        if get_property(actor.system, "wildcard"):
            return ctx.localize("SWADE.WildCard")
        match actor.type:
            case "character" | "npc":
                return ctx.localize("SWADE.Extra")
            case "vehicle":
                return ctx.localize("TYPES.Actor.vehicle")
            case _:
                return None

    def initiative(self, combatant: Combatant | None, ctx: HostContext) -> InitiativeDisplay:
        card_string = (combatant.card_string if combatant is not None else None) or ""
        suit = CardSuit.detect(card_string)

        value = card_string
        if suit is None and card_string in JOKER_CARDS:
            value = "JK"

        image = self._card_image(card_string, ctx)
        if image is not None:
            icon = image
        else:
            icon = suit.icon if suit is not None else ""
        return InitiativeDisplay(value=value, icon=icon, roll_icon=DRAW_CARD_ICON)

    @staticmethod
    def _action_deck_id(ctx: HostContext) -> str | None:
        swade = ctx.config.swade
        if swade.action_deck:
            return swade.action_deck
        namespace, key = swade.deck_setting
        return ctx.settings.get(namespace, key)

    def _card_image(self, card_string: str, ctx: HostContext) -> str | None:
        """在行动牌堆中查找牌面描述完全一致的牌，返回其图片。"""
        deck_id = self._action_deck_id(ctx)
        if not deck_id:
            logger.debug("未设置行动牌堆，跳过牌面图片查找")
            return None
        deck = ctx.cards.get_deck(deck_id)
        if deck is None:
            logger.debug("行动牌堆 {} 不存在", deck_id)
            return None
        for card in deck.cards:
            if card.description == card_string:
                return getattr(card, "img", None)
        return None
