"""宿主协作方：Protocol 定义与内存实现。"""

from .memory import (
    DictLocalizer,
    DictSettings,
    DictTypeLabels,
    MemoryActor,
    MemoryCard,
    MemoryCardRegistry,
    MemoryCombatant,
    MemoryDeck,
)
from .protocols import (
    Actor,
    Card,
    CardRegistry,
    Combatant,
    Deck,
    HostContext,
    Localizer,
    SettingsStore,
    TypeLabelRegistry,
    get_property,
)

__all__ = [
    # protocols
    "Actor",
    "Card",
    "CardRegistry",
    "Combatant",
    "Deck",
    "HostContext",
    "Localizer",
    "SettingsStore",
    "TypeLabelRegistry",
    "get_property",
    # memory
    "DictLocalizer",
    "DictSettings",
    "DictTypeLabels",
    "MemoryActor",
    "MemoryCard",
    "MemoryCardRegistry",
    "MemoryCombatant",
    "MemoryDeck",
]
