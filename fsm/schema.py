"""
FSM 配置模式

定义配置文件的验证模型，并转换为引擎使用的普通映射结构。
YAML 中未写任何条目的 `transitions:` 或状态会被解析为 None，这里按终态处理。
"""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StateDefinitionSchema(BaseModel):
    """单个状态定义"""
    model_config = ConfigDict(extra="ignore")

    transitions: Dict[str, str] = Field(
        default_factory=dict, description="事件 -> 目标状态"
    )

    @field_validator("transitions", mode="before")
    @classmethod
    def empty_transitions(cls, value: Any) -> Any:
        return {} if value is None else value


class FSMConfigSchema(BaseModel):
    """FSM 配置"""
    model_config = ConfigDict(extra="ignore")

    initial: str = Field(..., description="初始状态")
    states: Dict[str, StateDefinitionSchema] = Field(..., description="状态定义")

    @field_validator("states", mode="before")
    @classmethod
    def empty_state_definitions(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                state_id: {} if definition is None else definition
                for state_id, definition in value.items()
            }
        return value

    def to_config(self) -> Dict[str, Any]:
        """
        转换为引擎使用的配置映射

        Returns:
            {"initial": ..., "states": {state: {"transitions": {...}}}}，保持声明顺序
        """
        return {
            "initial": self.initial,
            "states": {
                state_id: {"transitions": dict(definition.transitions)}
                for state_id, definition in self.states.items()
            },
        }
