"""
FSM 引擎

核心职责：
1. 持有配置（初始状态 + 各状态的事件转换表）与当前状态
2. 校验状态切换与事件触发
3. 维护线性的撤销/重做历史

设计原则：
- 配置按引用持有，引擎只读不写
- 非法输入抛出异常，历史边界返回 False
- 新的状态切换会丢弃重做分支
"""
import logging
from collections.abc import Mapping
from typing import List, Optional

from config.settings import settings

from .exceptions import ConfigurationError, InvalidEventError, InvalidStateError

logger = logging.getLogger(__name__)


class FSMEngine:
    """
    FSM 引擎

    配置结构：
        {
            "initial": "A",
            "states": {
                "A": {"transitions": {"go": "B"}},
                "B": {"transitions": {}},
            },
        }

    历史记录 history 与游标 history_cursor 始终满足
    history[history_cursor] == 当前状态。
    """

    def __init__(self, config: Optional[Mapping], strict: Optional[bool] = None):
        """
        初始化 FSM 引擎

        Args:
            config: FSM 配置映射
            strict: 是否校验初始状态已声明，默认取 settings.FSM_STRICT_INITIAL

        Raises:
            ConfigurationError: 未提供配置，或严格模式下初始状态未声明
        """
        if config is None:
            raise ConfigurationError("The config is not set")

        self.config = config
        self.strict = settings.FSM_STRICT_INITIAL if strict is None else strict
        self._check_initial()

        self.current_state = config["initial"]
        self.history: List[str] = [self.current_state]
        self.history_cursor = 0

    def _check_initial(self) -> None:
        """检查初始状态是否已声明（默认只记录警告）"""
        initial = self.config.get("initial")
        states = self.config.get("states")
        if isinstance(states, Mapping) and initial in states:
            return

        if self.strict:
            raise ConfigurationError(
                f"Initial state {initial!r} is not declared in states"
            )
        if isinstance(states, Mapping):
            logger.warning(
                "Initial state %r is not declared in states %s",
                initial,
                list(states),
            )

    @property
    def states(self) -> Mapping:
        """配置中的状态定义"""
        return self.config["states"]

    def get_state(self) -> str:
        """获取当前状态"""
        return self.current_state

    def change_state(self, state: str) -> None:
        """
        直接切换到指定状态

        不检查转换规则，任何已声明的状态都可以直接到达。
        若此前执行过撤销，当前游标之后的重做分支会被丢弃。

        Args:
            state: 目标状态

        Raises:
            InvalidStateError: 目标状态未声明
        """
        self._change_state(state)

    def _change_state(self, state: str, event: Optional[str] = None) -> None:
        if state not in self.states:
            logger.debug("Rejected change to undeclared state %r", state)
            raise InvalidStateError(state)

        from_state = self.current_state
        self.current_state = state
        self.history_cursor += 1
        if self.history_cursor < len(self.history):
            del self.history[self.history_cursor:]
        self.history.append(state)

        logger.debug(
            "FSM transition: %s -> %s",
            from_state,
            state,
            extra={"extra_data": {"from_state": from_state, "to_state": state, "event": event}},
        )

    def trigger(self, event: str) -> None:
        """
        按当前状态的转换规则处理事件

        Args:
            event: 事件名称

        Raises:
            InvalidEventError: 当前状态没有该事件的转换
            InvalidStateError: 转换目标未声明
        """
        definition = self.states.get(self.current_state)
        next_state = definition["transitions"].get(event) if definition else None
        if not next_state:
            logger.debug(
                "Rejected event %r in state %r", event, self.current_state
            )
            raise InvalidEventError(event, self.current_state)

        self._change_state(next_state, event)

    def reset(self) -> None:
        """
        重置到初始状态

        重置本身作为一次历史记录写入游标之后，不丢弃重做分支，
        也不校验初始状态。
        """
        from_state = self.current_state
        self.current_state = self.config["initial"]
        self.history_cursor += 1
        self.history.insert(self.history_cursor, self.current_state)

        logger.debug("FSM reset: %s -> %s", from_state, self.current_state)

    def get_states(self, event: Optional[str] = None) -> List[str]:
        """
        获取状态列表

        Args:
            event: 事件名称；为空时返回全部状态

        Returns:
            声明了该事件转换的状态（按声明顺序）
        """
        if not event:
            return list(self.states)

        return [
            state_id
            for state_id, definition in self.states.items()
            if definition["transitions"].get(event)
        ]

    def get_events(self) -> List[str]:
        """获取当前状态可触发的事件"""
        definition = self.states.get(self.current_state)
        if not definition:
            return []
        transitions = definition["transitions"]
        return [event for event, target in transitions.items() if target]

    def can_undo(self) -> bool:
        return self.history_cursor > 0

    def can_redo(self) -> bool:
        return self.history_cursor + 1 < len(self.history)

    def undo(self) -> bool:
        """
        撤销到上一个状态

        Returns:
            是否撤销成功；已在历史起点时返回 False
        """
        if not self.can_undo():
            return False

        self.history_cursor -= 1
        self.current_state = self.history[self.history_cursor]
        logger.debug("FSM undo -> %s", self.current_state)
        return True

    def redo(self) -> bool:
        """
        重做到下一个状态

        Returns:
            是否重做成功；已在历史末尾时返回 False
        """
        if not self.can_redo():
            return False

        self.history_cursor += 1
        self.current_state = self.history[self.history_cursor]
        logger.debug("FSM redo -> %s", self.current_state)
        return True

    def clear_history(self) -> None:
        """清空历史，只保留当前状态"""
        self.history = [self.current_state]
        self.history_cursor = 0
        logger.debug("FSM history cleared at %s", self.current_state)

    def get_history(self) -> List[str]:
        """获取状态历史（副本）"""
        return list(self.history)

    def is_terminal(self) -> bool:
        """检查当前状态是否没有任何转换"""
        return not self.get_events()

    def __repr__(self) -> str:
        return (
            f"FSMEngine(state={self.current_state}, "
            f"history={self.history_cursor + 1}/{len(self.history)})"
        )
