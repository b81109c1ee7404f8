"""
带回读校验的文本框填充器

填写流程:
1. ele.input(value, clear=True)
2. 回读 ele.value
3. 不一致则重填，直到用完 max_fill_attempts
4. 最后一次仍不一致: verify_final_value 为真时抛出 RetryExhausted，
   否则记录警告后接受
"""

from typing import Optional

from formprobe import config
from formprobe.config import FillerConfig, TimeoutConfig
from formprobe.core.element_access import find_required
from formprobe.core.locators import PageLocators
from formprobe.core.recorder import InteractionRecorder
from formprobe.domain.entities import FieldState
from formprobe.domain.exceptions import AssertionTimeout, RetryExhausted
from formprobe.domain.interfaces import IBrowserTab


class VerifiedTextFiller:
    """
    文本框填充器

    适用于 firstName、lastName、email、mobile、address。
    """

    def __init__(
        self,
        tab: IBrowserTab,
        locators: PageLocators,
        recorder: InteractionRecorder,
        filler_config: Optional[FillerConfig] = None,
        timeout_config: Optional[TimeoutConfig] = None
    ):
        self.tab = tab
        self.locators = locators
        self.recorder = recorder
        self.filler_config = filler_config or config.filler_config
        self.timeout_config = timeout_config or config.timeout_config

    def read(self, name: str) -> FieldState:
        """回读输入框当前值（不缓存）"""
        ele = find_required(
            self.tab, self.locators.locator_for(name), self.timeout_config.required_wait, name
        )
        return FieldState(name, ele.value or "")

    def fill(self, name: str, value: str, wait_visible: bool = False) -> FieldState:
        """
        填写并校验

        Args:
            name: 逻辑字段名（定位符表 fields 的键）
            value: 目标值
            wait_visible: 先等待字段可见（手机号输入框在导航后异步渲染）

        Returns:
            最后一次回读的 FieldState

        Raises:
            AssertionTimeout: 字段未出现
            RetryExhausted: 所有尝试后回读仍不一致
        """
        locator = self.locators.locator_for(name)
        timeout = self.timeout_config.required_wait

        if wait_visible and not self.tab.wait.ele_displayed(locator, timeout=timeout):
            raise AssertionTimeout(name, "visible", timeout)

        attempts = max(1, self.filler_config.max_fill_attempts)
        state = FieldState(name, "")
        for attempt in range(1, attempts + 1):
            ele = find_required(self.tab, locator, timeout, name)
            ele.input(value, clear=True)
            state = FieldState(name, ele.value or "")
            if state.matches(value):
                self.recorder.emit("fill", name, repr(value), level="debug")
                return state
            if attempt < attempts:
                self.recorder.emit(
                    "retry", name,
                    f"expected {value!r}, got {state.value!r}", level="warning"
                )

        if self.filler_config.verify_final_value:
            self.recorder.emit("fill_failed", name, f"final value {state.value!r}", level="error")
            raise RetryExhausted(name, value, state.value, attempts)

        self.recorder.emit("fill_accepted", name, f"final value {state.value!r}", level="warning")
        return state
