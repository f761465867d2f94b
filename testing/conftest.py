"""测试公共 fixtures。"""

from pathlib import Path

import pytest

from combatdock.host.memory import (
    DictLocalizer,
    DictSettings,
    DictTypeLabels,
    MemoryCard,
    MemoryCardRegistry,
    MemoryDeck,
)
from combatdock.host.protocols import HostContext
from combatdock.infra.config import DockConfig


@pytest.fixture
def tmp_yaml(tmp_path: Path):
    """创建临时 YAML 文件的工厂 fixture。"""

    def _factory(name: str, content: str) -> Path:
        p = tmp_path / name
        p.write_text(content, encoding="utf-8")
        return p

    return _factory


@pytest.fixture
def localizer() -> DictLocalizer:
    return DictLocalizer(
        {
            "DND5E.CreatureDragon": "Dragon",
            "DND5E.CreatureUndead": "Undead",
            "SWADE": {
                "WildCard": "Wild Card",
                "Extra": "Extra",
                "Wounds": "Wounds",
                "Pace": "Pace",
            },
            "TYPES.Actor.vehicle": "Vehicle",
        }
    )


@pytest.fixture
def type_labels() -> DictTypeLabels:
    return DictTypeLabels(
        {
            "dragon": "DND5E.CreatureDragon",
            "undead": "DND5E.CreatureUndead",
        }
    )


@pytest.fixture
def action_deck() -> MemoryCardRegistry:
    """只有两张带图片的牌的行动牌堆。"""
    return MemoryCardRegistry(
        {
            "deck-1": MemoryDeck(
                [
                    MemoryCard("K♠", "cards/king-spades.webp"),
                    MemoryCard("Red J", "cards/red-joker.webp"),
                    MemoryCard("2♣"),
                ]
            )
        }
    )


@pytest.fixture
def make_ctx(localizer, type_labels, action_deck):
    """按系统 id 构造 HostContext 的工厂 fixture。"""

    def _factory(system_id: str, config: DockConfig | None = None, deck_id: str | None = "deck-1") -> HostContext:
        settings = DictSettings({"swade": {"actionDeck": deck_id}} if deck_id else {})
        return HostContext(
            system_id=system_id,
            localizer=localizer,
            type_labels=type_labels,
            cards=action_deck,
            settings=settings,
            config=config or DockConfig(),
        )

    return _factory
