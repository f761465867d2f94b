"""基础设施层：日志、配置、异常体系、文件工具。"""

from .config import (
    AttributeOverride,
    ConfigManager,
    DockConfig,
    LogConfig,
    SwadeConfig,
)
from .exceptions import (
    CombatDockError,
    ConfigError,
    FlagStoreError,
    HostError,
    UnsupportedSystemError,
)
from .file_utils import load_yaml, merge_dicts
from .logger import setup_logger

__all__ = [
    # config
    "AttributeOverride",
    "ConfigManager",
    "DockConfig",
    "LogConfig",
    "SwadeConfig",
    # exceptions
    "CombatDockError",
    "ConfigError",
    "FlagStoreError",
    "HostError",
    "UnsupportedSystemError",
    # file_utils
    "load_yaml",
    "merge_dicts",
    # logger
    "setup_logger",
]
