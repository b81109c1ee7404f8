# Domain Entities

"""
领域实体 - 核心数据对象

提供表单记录、确认弹窗记录和交互事件，不依赖任何外部框架。
"""

from .form_record import FormRecord, FieldState, Gender, Hobby
from .confirmation_record import ConfirmationRecord
from .interaction import InteractionEvent, SweepReport, SubmissionResult

__all__ = [
    'FormRecord',
    'FieldState',
    'Gender',
    'Hobby',
    'ConfirmationRecord',
    'InteractionEvent',
    'SweepReport',
    'SubmissionResult',
]
