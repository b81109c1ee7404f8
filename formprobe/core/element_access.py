"""
元素访问辅助函数

DrissionPage 未找到元素时返回假值的 NoneElement，这里统一把
"必需元素缺失" 转换为 AssertionTimeout。
"""

from typing import Optional

from formprobe.domain.exceptions import AssertionTimeout
from formprobe.domain.interfaces import IBrowserTab, IElement


def find_required(tab: IBrowserTab, locator: str, timeout: float, target: Optional[str] = None) -> IElement:
    """查找必需元素，超时未找到即失败"""
    ele = tab.ele(locator, timeout=timeout)
    if not ele:
        raise AssertionTimeout(target or locator, "found", timeout)
    return ele


def is_displayed(tab: IBrowserTab, locator: str, timeout: float = 0) -> bool:
    """元素存在且可见"""
    ele = tab.ele(locator, timeout=timeout)
    return bool(ele) and bool(ele.states.is_displayed)


def is_editable(ele: IElement) -> bool:
    """元素可用且非只读"""
    return bool(ele.states.is_enabled) and ele.attr('readonly') is None
