"""宿主协作方的内存实现。

用于脱离虚拟桌面宿主独立运行（脚本、测试），
每个类都满足 :mod:`combatdock.host.protocols` 中对应的 Protocol。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from combatdock.infra.file_utils import load_yaml


# ── 服务 ──


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, full_key))
        else:
            flat[full_key] = str(value)
    return flat


class DictLocalizer:
    """字典本地化，缺失的键原样返回。"""

    def __init__(self, translations: dict[str, Any] | None = None) -> None:
        self.translations = _flatten(translations or {})

    @classmethod
    def from_file(cls, path: str | Path) -> DictLocalizer:
        """加载语言文件（JSON 或 YAML），嵌套键按点号展开。"""
        return cls(load_yaml(path))

    def localize(self, key: str) -> str:
        return self.translations.get(key, key)


class DictTypeLabels:
    """生物类型标签表。"""

    def __init__(self, labels: dict[str, str] | None = None) -> None:
        self.labels = dict(labels or {})

    def label_for(self, type_value: str) -> str | None:
        return self.labels.get(type_value)


@dataclass
class MemoryCard:
    description: str
    img: str | None = None


@dataclass
class MemoryDeck:
    cards: list[MemoryCard] = field(default_factory=list)


class MemoryCardRegistry:
    """按 id 保存牌堆。"""

    def __init__(self, decks: dict[str, MemoryDeck] | None = None) -> None:
        self.decks = dict(decks or {})

    def get_deck(self, deck_id: str) -> MemoryDeck | None:
        return self.decks.get(deck_id)


class DictSettings:
    """``{namespace: {key: value}}`` 形式的宿主设置。"""

    def __init__(self, values: dict[str, dict[str, Any]] | None = None) -> None:
        self.values = {ns: dict(kv) for ns, kv in (values or {}).items()}

    def get(self, namespace: str, key: str) -> Any:
        return self.values.get(namespace, {}).get(key)

    def set(self, namespace: str, key: str, value: Any) -> None:
        self.values.setdefault(namespace, {})[key] = value


# ── 实体 ──


@dataclass
class MemoryActor:
    type: str
    system: dict[str, Any] = field(default_factory=dict)
    classes: dict[str, Any] | list[Any] = field(default_factory=dict)
    name: str = ""


@dataclass
class MemoryCombatant:
    """带 flag 存储的战斗者。flag 按 ``scope → key → value`` 保存。"""

    actor: MemoryActor | None = None
    initiative: float | None = None
    card_string: str | None = None
    is_owner: bool = True
    flags: dict[str, dict[str, Any]] = field(default_factory=dict)

    def get_flag(self, scope: str, key: str) -> Any:
        return self.flags.get(scope, {}).get(key)

    def set_flag(self, scope: str, key: str, value: Any) -> None:
        self.flags.setdefault(scope, {})[key] = value

    def unset_flag(self, scope: str, key: str) -> None:
        self.flags.get(scope, {}).pop(key, None)
