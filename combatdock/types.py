"""全局枚举类型定义。

所有与游戏系统语义相关的枚举集中于此，供各层引用。
"""

from __future__ import annotations

from enum import Enum


# ── 枚举基类 ──


class BaseEnum(Enum):
    """提供更友好的中文报错信息。"""

    @classmethod
    def _missing_(cls, value: object) -> None:
        supported = ", ".join(str(m.value) for m in cls)
        raise ValueError(f'"{value}" 不是合法的 {cls.__name__} 取值。 支持: [{supported}]')


class StrEnum(str, BaseEnum):
    """字符串枚举基类。"""


# ── 游戏系统 ──


class GameSystem(StrEnum):
    """受支持的游戏规则系统（宿主中的 ``game.system.id``）。"""

    dnd5e = "dnd5e"
    cyberpunk_red = "cyberpunk-red-core"
    swade = "swade"
    pirateborg = "pirateborg"

    @classmethod
    def parse(cls, system_id: str | None) -> GameSystem | None:
        """宽松解析：未知系统返回 None 而不是抛出异常。"""
        for member in cls:
            if member.value == system_id:
                return member
        return None


# ── 回合动作标记 (dnd5e) ──

UNAVAILABLE_COLOR = "#888888"
"""动作已用时三个图标共用的灰色。"""


class ActionSlot(StrEnum):
    """每回合可切换的动作槽位，值即 flag 键名。"""

    action = "action"
    """动作"""
    bonus = "bonus"
    """附赠动作"""
    reaction = "reaction"
    """反应"""

    @property
    def icon(self) -> str:
        """槽位图标。"""
        match self:
            case ActionSlot.action:
                return "fas fa-circle"
            case ActionSlot.bonus:
                return "fas fa-triangle"
            case ActionSlot.reaction:
                return "fas fa-sparkle"
            case _:
                raise ValueError(f"没有为 {self} 设置图标")

    @property
    def color(self) -> str:
        """槽位可用时的颜色。"""
        match self:
            case ActionSlot.action:
                return "green"
            case ActionSlot.bonus:
                return "#ff9f4c"
            case ActionSlot.reaction:
                return "#e16de1"
            case _:
                raise ValueError(f"没有为 {self} 设置颜色")


# ── 扑克牌 (swade 先攻) ──


class CardSuit(StrEnum):
    """先攻牌花色，值为牌面字符串中的花色符号。"""

    hearts = "♥"
    diamonds = "♦"
    clubs = "♣"
    spades = "♠"

    @property
    def icon(self) -> str:
        """花色对应的字形图标。"""
        match self:
            case CardSuit.hearts:
                return "fas fa-heart"
            case CardSuit.diamonds:
                return "fas fa-diamond"
            case CardSuit.clubs:
                return "fas fa-club"
            case CardSuit.spades:
                return "fas fa-spade"
            case _:
                raise ValueError(f"没有为 {self} 设置图标")

    @classmethod
    def detect(cls, card_string: str) -> CardSuit | None:
        """按 ♥ ♦ ♣ ♠ 的顺序查找牌面中出现的第一个花色。"""
        for suit in cls:
            if suit.value in card_string:
                return suit
        return None


JOKER_CARDS: frozenset[str] = frozenset({"Red J", "Blk J"})
"""大小王的牌面字符串，显示时统一为 ``JK``。"""
