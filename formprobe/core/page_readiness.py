"""
页面就绪与干扰元素处理

导航流程:
1. 打开表单页，校验标题
2. 从 DOM 中直接移除已知遮挡元素
3. 表单容器必须可见
4. 尽力而为的清理：等待广告加载 -> 逐个尝试关闭弹窗 -> 隐藏广告元素
5. 必填字段必须可见且可编辑

第 4 步中任何一个弹窗不存在或关闭失败都不是错误，缺失才是常态。
"""

import re
from typing import Optional

from formprobe import config
from formprobe.config import BrowserConfig, TimeoutConfig
from formprobe.core.element_access import find_required, is_editable
from formprobe.core.locators import PageLocators, REQUIRED_FIELDS
from formprobe.core.recorder import InteractionRecorder
from formprobe.domain.entities import SweepReport
from formprobe.domain.exceptions import AssertionTimeout
from formprobe.domain.interfaces import IBrowserTab
from formprobe.infrastructure.js import ScriptStore


class PageReadiness:
    """表单页导航与干扰元素处理"""

    def __init__(
        self,
        tab: IBrowserTab,
        locators: PageLocators,
        recorder: InteractionRecorder,
        browser_config: Optional[BrowserConfig] = None,
        timeout_config: Optional[TimeoutConfig] = None
    ):
        self.tab = tab
        self.locators = locators
        self.recorder = recorder
        self.browser_config = browser_config or config.browser_config
        self.timeout_config = timeout_config or config.timeout_config

    def navigate(self) -> SweepReport:
        """
        打开表单页并使其进入可交互状态

        Returns:
            广告/弹窗清理结果

        Raises:
            AssertionTimeout: 标题不符、表单或必填字段未出现
        """
        url = self.browser_config.form_url
        timeout = self.timeout_config.required_wait

        self.tab.get(url)
        title = self.tab.title or ""
        if not re.search(self.browser_config.title_pattern, title):
            raise AssertionTimeout(
                f"page title {title!r}", f"matching /{self.browser_config.title_pattern}/", timeout
            )
        self.recorder.emit("navigate", url, title)

        self.remove_interference()

        if not self.tab.wait.ele_displayed(self.locators.control('form'), timeout=timeout):
            raise AssertionTimeout("form container", "visible", timeout)

        report = self.sweep()
        self.validate_required_elements()
        return report

    def remove_interference(self) -> int:
        """直接移除已知遮挡元素，返回移除数量"""
        removed = self.tab.run_js(ScriptStore.REMOVE_ELEMENTS, list(self.locators.interference_removed))
        removed = int(removed or 0)
        self.recorder.emit("remove", "interference", f"{removed} element(s)", level="debug")
        return removed

    def sweep(self) -> SweepReport:
        """
        尽力而为的清理

        每个弹窗定位符独立尝试，失败即丢弃，不影响后续项。
        """
        report = SweepReport()
        self.tab.wait(self.timeout_config.settle_duration)

        for locator in self.locators.overlay_close:
            if self._dismiss_overlay(locator):
                report.closed.append(locator)
                self.recorder.emit("dismiss", locator, "closed overlay")

        hidden = self.tab.run_js(ScriptStore.HIDE_ELEMENTS, list(self.locators.interference_hidden))
        report.hidden = int(hidden or 0)
        self.recorder.emit("sweep", "overlays", f"closed={len(report.closed)} hidden={report.hidden}")
        return report

    def _dismiss_overlay(self, locator: str) -> bool:
        try:
            ele = self.tab.ele(locator, timeout=self.timeout_config.optional_wait)
            if not ele or not ele.states.is_displayed:
                return False
            ele.click(by_js=True)
            return True
        except Exception as e:
            self.recorder.emit("dismiss", locator, f"ignored: {e}", level="debug")
            return False

    def validate_required_elements(self) -> None:
        """
        必填字段必须可见且可编辑

        Raises:
            AssertionTimeout: 任一字段不可见或不可编辑
        """
        timeout = self.timeout_config.required_wait
        for name in REQUIRED_FIELDS:
            locator = self.locators.locator_for(name)
            if not self.tab.wait.ele_displayed(locator, timeout=timeout):
                raise AssertionTimeout(name, "visible", timeout)
            if not is_editable(find_required(self.tab, locator, timeout, name)):
                raise AssertionTimeout(name, "editable", timeout)
            self.recorder.emit("present", name, "visible and editable", level="debug")
        self.recorder.emit("ready", "form", "all required fields present", level="success")
