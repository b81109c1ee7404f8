"""
交互事件相关数据模型

包含:
- InteractionEvent: 页面对象每次操作产生的结构化事件
- SweepReport: 一次广告/弹窗清理的结果
- SubmissionResult: 一次完整提交流程的结果
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List

from .confirmation_record import ConfirmationRecord
from .form_record import FormRecord


@dataclass(frozen=True)
class InteractionEvent:
    """单条交互事件"""
    action: str                 # fill / retry / click / navigate / sweep / guard ...
    target: str                 # 逻辑字段名或定位符
    detail: str = ""            # 附加说明
    level: str = "info"         # debug / info / success / warning / error
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data


@dataclass
class SweepReport:
    """广告/弹窗清理结果（尽力而为，缺失不是错误）"""
    closed: List[str] = field(default_factory=list)    # 被点击关闭的弹窗定位符
    hidden: int = 0                                     # 被隐藏的广告元素数量

    @property
    def touched(self) -> bool:
        return bool(self.closed) or self.hidden > 0


@dataclass
class SubmissionResult:
    """一次 填写 -> 提交 -> 核对 -> 关闭 流程的结果"""
    record: FormRecord
    confirmation: ConfirmationRecord
    events: List[InteractionEvent] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        return {
            'name': self.record.full_name,
            'confirmation': self.confirmation.to_dict(),
            'events': len(self.events),
        }
