"""配置管理：基于 Pydantic v2。

配置从 YAML 文件加载，经过 Pydantic 校验后生成不可变的配置对象。

使用方式::

    from combatdock.infra.config import ConfigManager

    config = ConfigManager.load("combatdock.yaml")
    print(config.module_id)
"""

from __future__ import annotations

import datetime
from pathlib import Path
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigError
from .file_utils import load_yaml, merge_dicts
from combatdock.types import GameSystem


# ── 子配置模型 ──


class LogConfig(BaseModel):
    """日志配置。"""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    """日志级别"""
    root: Path = Path("log")
    """日志保存根目录"""
    dir: Path | None = None
    """日志保存路径。自动按日期生成"""
    to_file: bool = False
    """是否写入日志文件。插件默认只输出到控制台"""
    rotation: str = "10 MB"
    """单个日志文件最大体积"""
    retention: str = "7 days"
    """日志文件保留时长"""

    @model_validator(mode="after")
    def _set_log_dir(self) -> LogConfig:
        if self.dir is None:
            ts = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            object.__setattr__(self, "dir", self.root / ts)
        return self


class AttributeOverride(BaseModel):
    """用户自定义的追踪属性条目。"""

    model_config = {"frozen": True}

    path: str
    """actor.system 下的点分路径"""
    icon: str = ""
    """图标类名"""
    unit: str = ""
    """单位标签"""
    localize: bool = False
    """unit 是否为本地化键名"""

    @field_validator("path")
    @classmethod
    def _validate_path(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("属性路径不能为空")
        return v


class SwadeConfig(BaseModel):
    """swade 先攻牌配置。"""

    model_config = {"frozen": True}

    action_deck: str | None = None
    """行动牌堆 id。None = 读取宿主设置"""
    deck_setting: tuple[str, str] = ("swade", "actionDeck")
    """保存行动牌堆 id 的宿主设置 (namespace, key)"""


# ── 顶层配置 ──


class DockConfig(BaseModel):
    """插件配置（顶层聚合）。"""

    model_config = {"frozen": True}

    module_id: str = "combatdock"
    """flag 作用域，即插件 id"""
    log: LogConfig = Field(default_factory=LogConfig)
    swade: SwadeConfig = Field(default_factory=SwadeConfig)
    attributes: dict[str, list[AttributeOverride]] = Field(default_factory=dict)
    """按系统覆盖默认追踪属性，整表替换"""

    @field_validator("module_id")
    @classmethod
    def _validate_module_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("module_id 不能为空")
        return v

    @model_validator(mode="after")
    def _warn_unknown_systems(self) -> DockConfig:
        for system_id in self.attributes:
            if GameSystem.parse(system_id) is None:
                logger.warning("属性覆盖中的系统 {} 没有内置适配器", system_id)
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> DockConfig:
        """从 YAML 文件加载配置。"""
        data = load_yaml(path)
        return cls.model_validate(data)


# ── ConfigManager ──


class ConfigManager:
    """配置管理器：提供加载入口。"""

    @staticmethod
    def load(path: str | Path, overrides: dict[str, Any] | None = None) -> DockConfig:
        """从文件加载插件配置。不存在时返回默认配置。

        *overrides* 为宿主运行时设置，深度合并在文件内容之上。

        Raises
        ------
        ConfigError
            文件存在但无法解析或校验失败。
        """
        path = Path(path)
        data: dict[str, Any] = {}
        if path.exists():
            data = load_yaml(path)
        else:
            logger.warning("配置文件 {} 不存在，使用默认配置", path)
        if overrides:
            data = merge_dicts(data, overrides)
        try:
            config = DockConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(path), reason=str(e)) from e
        logger.info("已加载配置: {}", path)
        return config
