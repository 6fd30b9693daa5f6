"""
FSM 模块

基于声明式配置的有限状态机，支持事件驱动的状态转换和线性撤销/重做历史。

使用示例:
    from fsm import FSMEngine, load_config

    engine = FSMEngine(load_config("fsm.yaml"))
    engine.trigger("submit")
    engine.undo()
    engine.redo()

    # 直接使用字典配置
    engine = FSMEngine({
        "initial": "draft",
        "states": {
            "draft": {"transitions": {"submit": "review"}},
            "review": {"transitions": {"approve": "published"}},
            "published": {"transitions": {}},
        },
    })
"""

from .exceptions import (
    FSMError,
    ConfigurationError,
    InvalidStateError,
    InvalidEventError,
)

from .schema import (
    FSMConfigSchema,
    StateDefinitionSchema,
)

from .engine import FSMEngine

from .loader import (
    load_config,
    load_config_from_dict,
)

__all__ = [
    # 核心类
    "FSMEngine",
    # 异常
    "FSMError",
    "ConfigurationError",
    "InvalidStateError",
    "InvalidEventError",
    # 配置模式
    "FSMConfigSchema",
    "StateDefinitionSchema",
    # 加载函数
    "load_config",
    "load_config_from_dict",
]
