"""
交互事件记录器

页面对象的每个操作都以 InteractionEvent 记录下来，而不是直接打印：
- 事件追加到 events 列表，供调用方在操作结束后检查
- 同时写入日志
- 可选的观察者回调实时接收事件
"""

from typing import Callable, List, Optional

from formprobe.domain.entities import InteractionEvent
from formprobe.utils.logger import get_logger


class InteractionRecorder:
    """结构化事件记录器"""

    def __init__(
        self,
        name: str,
        observer: Optional[Callable[[InteractionEvent], None]] = None
    ):
        self.logger = get_logger(name)
        self.observer = observer
        self.events: List[InteractionEvent] = []

    def emit(self, action: str, target: str, detail: str = "", level: str = "info") -> InteractionEvent:
        event = InteractionEvent(action=action, target=target, detail=detail, level=level)
        self.events.append(event)

        log_method = getattr(self.logger, level, self.logger.info)
        log_method(f"[{action}] {target} {detail}".rstrip())

        if self.observer:
            try:
                self.observer(event)
            except Exception:
                self.logger.debug("事件观察者回调失败")
        return event

    def actions(self) -> List[str]:
        """按顺序返回已记录的动作名"""
        return [e.action for e in self.events]

    def clear(self) -> None:
        self.events.clear()
