"""
FSM 配置加载器

从 YAML 文件或字典加载 FSM 配置，使用 pydantic 模型验证结构。
初始状态不要求出现在 states 中（与引擎一致），但会记录警告。
"""
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from config.settings import settings

from .exceptions import ConfigurationError
from .schema import FSMConfigSchema

logger = logging.getLogger(__name__)


def _has_boolean_event(data: Mapping[str, Any]) -> bool:
    """检查事件名是否被 YAML 解析成了布尔值"""
    states = data.get("states")
    if not isinstance(states, Mapping):
        return False
    for definition in states.values():
        transitions = definition.get("transitions") if isinstance(definition, Mapping) else None
        if isinstance(transitions, Mapping) and any(isinstance(k, bool) for k in transitions):
            return True
    return False


def load_config_from_dict(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    验证字典形式的配置

    Args:
        data: 原始配置，形如 {"initial": ..., "states": {...}}

    Returns:
        引擎可直接使用的配置映射

    Raises:
        ConfigurationError: 配置结构无效
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"FSM config must be a mapping, got {type(data).__name__}"
        )

    try:
        schema = FSMConfigSchema.model_validate(dict(data))
    except ValidationError as exc:
        message = f"Invalid FSM config: {exc}"
        if _has_boolean_event(data):
            message += (
                "\nYAML reads unquoted on/off/yes/no as booleans, "
                "quote such event names (e.g. \"on\": lit)"
            )
        raise ConfigurationError(message, cause=exc) from exc

    if schema.initial not in schema.states:
        logger.warning(
            "Initial state %r is not declared in states %s",
            schema.initial,
            list(schema.states),
        )

    return schema.to_config()


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    从 YAML 文件加载配置

    Args:
        path: 配置文件路径，默认使用 settings.FSM_CONFIG_PATH

    Returns:
        引擎可直接使用的配置映射

    Raises:
        ConfigurationError: 未指定路径、文件不存在或内容无效
    """
    config_path = path or settings.FSM_CONFIG_PATH
    if not config_path:
        raise ConfigurationError("FSM config path is not set")

    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigurationError(f"FSM config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Failed to parse FSM config {config_path}: {exc}", cause=exc
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"Failed to read FSM config {config_path}: {exc}", cause=exc
        ) from exc

    logger.debug("Loaded FSM config from %s", config_path)
    return load_config_from_dict(data or {})
