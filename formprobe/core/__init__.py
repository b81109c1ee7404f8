"""
Core 模块

- PracticeFormPage: 练习表单页面对象（门面）
- ConfirmationModal: 确认弹窗生命周期
- PageReadiness: 导航与干扰元素处理
- reconciliation: 表单与弹窗核对
- api_contract: ReqRes 响应契约检查
"""

from .locators import PageLocators, DEMOQA_LOCATORS
from .confirmation import ConfirmationModal, ModalState, SUCCESS_PHRASE
from .page_readiness import PageReadiness
from .practice_form_page import PracticeFormPage

__all__ = [
    'PageLocators',
    'DEMOQA_LOCATORS',
    'ConfirmationModal',
    'ModalState',
    'SUCCESS_PHRASE',
    'PageReadiness',
    'PracticeFormPage',
]
