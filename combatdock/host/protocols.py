"""宿主协作方接口。

插件读取的一切宿主全局状态（当前系统 id、本地化、生物类型标签表、
牌堆、设置、战斗者 flag）都通过这里定义的 Protocol 显式注入，
使四个查询函数成为纯函数，可以脱离宿主独立测试。

典型使用::

    from combatdock.host.protocols import HostContext

    ctx = HostContext(system_id="dnd5e", localizer=..., type_labels=...)
    generate_description(actor, ctx)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from combatdock.infra.config import DockConfig
from combatdock.types import GameSystem


# ═══════════════════════════════════════════════════════════════════════════════
# 宿主服务
# ═══════════════════════════════════════════════════════════════════════════════


class Localizer(Protocol):
    """本地化服务: ``key → 文本``，缺失时返回 key 本身。"""

    def localize(self, key: str) -> str: ...


class TypeLabelRegistry(Protocol):
    """生物 / 载具类型标签表: ``type_value → 标签或本地化键``。"""

    def label_for(self, type_value: str) -> str | None: ...


class Card(Protocol):
    """牌堆中的单张牌。"""

    description: str
    img: str | None


class Deck(Protocol):
    """牌堆。"""

    cards: Iterable[Card]


class CardRegistry(Protocol):
    """牌堆注册表: ``deck_id → Deck``。"""

    def get_deck(self, deck_id: str) -> Deck | None: ...


class SettingsStore(Protocol):
    """宿主设置读取: ``(namespace, key) → 值``，未设置返回 None。"""

    def get(self, namespace: str, key: str) -> Any: ...


# ═══════════════════════════════════════════════════════════════════════════════
# 宿主实体
# ═══════════════════════════════════════════════════════════════════════════════


class Actor(Protocol):
    """游戏实体。``system`` 的结构完全由游戏系统决定。"""

    type: str
    system: Any


class Combatant(Protocol):
    """回合追踪器中的一条记录。"""

    actor: Actor | None
    initiative: float | None
    card_string: str | None
    """swade 先攻牌牌面，其他系统为 None"""
    is_owner: bool

    def get_flag(self, scope: str, key: str) -> Any: ...

    def set_flag(self, scope: str, key: str, value: Any) -> None: ...


# ═══════════════════════════════════════════════════════════════════════════════
# 上下文
# ═══════════════════════════════════════════════════════════════════════════════


class _IdentityLocalizer:
    def localize(self, key: str) -> str:
        return key


class _EmptyTypeLabels:
    def label_for(self, type_value: str) -> str | None:
        return None


class _EmptyCards:
    def get_deck(self, deck_id: str) -> Deck | None:
        return None


class _EmptySettings:
    def get(self, namespace: str, key: str) -> Any:
        return None


@dataclass(frozen=True)
class HostContext:
    """一次查询所需的全部宿主协作方。

    Attributes
    ----------
    system_id:
        当前激活的游戏系统 id。
    localizer:
        本地化服务。默认原样返回 key。
    type_labels:
        生物类型标签表。默认为空表。
    cards:
        牌堆注册表。默认没有任何牌堆。
    settings:
        宿主设置。默认全部未设置。
    config:
        插件配置。
    """

    system_id: str
    localizer: Localizer = field(default_factory=_IdentityLocalizer)
    type_labels: TypeLabelRegistry = field(default_factory=_EmptyTypeLabels)
    cards: CardRegistry = field(default_factory=_EmptyCards)
    settings: SettingsStore = field(default_factory=_EmptySettings)
    config: DockConfig = field(default_factory=DockConfig)

    @property
    def system(self) -> GameSystem | None:
        """解析后的游戏系统，未知系统为 None。"""
        return GameSystem.parse(self.system_id)

    def localize(self, key: str) -> str:
        return self.localizer.localize(key)


# ═══════════════════════════════════════════════════════════════════════════════
# 数据读取
# ═══════════════════════════════════════════════════════════════════════════════

_MISSING = object()


def get_property(data: Any, path: str, default: Any = None) -> Any:
    """按点分路径读取嵌套数据，兼容 Mapping 与属性对象。

    >>> get_property({"details": {"cr": 2}}, "details.cr")
    2

    任一层缺失时返回 *default*。
    """
    current = data
    for part in path.split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        else:
            current = getattr(current, part, _MISSING)
        if current is _MISSING:
            return default
    return current
