"""
确认弹窗生命周期

状态: CLOSED -> OPEN -> CLOSED

- 提交成功后进入 OPEN，标题必须包含固定成功文案
- OPEN 期间可以提取两列表格为 ConfirmationRecord
- 点击关闭按钮回到 CLOSED，弹窗必须不可见
- 守卫操作 ensure_closed() 在任何状态下都可调用，且幂等
"""

from enum import Enum
from typing import List, Optional, Tuple

from DrissionPage.common import Keys

from formprobe import config
from formprobe.config import TimeoutConfig
from formprobe.core.element_access import find_required, is_displayed
from formprobe.core.locators import PageLocators
from formprobe.core.recorder import InteractionRecorder
from formprobe.domain.entities import ConfirmationRecord
from formprobe.domain.exceptions import AssertionTimeout
from formprobe.domain.interfaces import IBrowserTab

SUCCESS_PHRASE = "Thanks for submitting the form"


class ModalState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class ConfirmationModal:
    """
    确认弹窗

    职责:
    - 等待弹窗出现并校验标题
    - 提取回显表格
    - 关闭弹窗
    - 守卫：弹窗意外打开时强制关闭，必要时刷新页面
    """

    def __init__(
        self,
        tab: IBrowserTab,
        locators: PageLocators,
        recorder: InteractionRecorder,
        timeout_config: Optional[TimeoutConfig] = None
    ):
        self.tab = tab
        self.locators = locators
        self.recorder = recorder
        self.timeout_config = timeout_config or config.timeout_config

    @property
    def container(self) -> str:
        return self.locators.modal['container']

    def is_open(self, timeout: float = 0) -> bool:
        return is_displayed(self.tab, self.container, timeout)

    @property
    def state(self) -> ModalState:
        return ModalState.OPEN if self.is_open() else ModalState.CLOSED

    def wait_until_open(self) -> None:
        """
        等待弹窗出现且标题包含成功文案

        Raises:
            AssertionTimeout: 弹窗未出现或标题不符
        """
        timeout = self.timeout_config.required_wait
        if not self.tab.wait.ele_displayed(self.container, timeout=timeout):
            raise AssertionTimeout("confirmation modal", "visible", timeout)

        title = find_required(self.tab, self.locators.modal['title'], timeout, "modal title")
        text = title.text or ""
        if SUCCESS_PHRASE not in text:
            raise AssertionTimeout(
                f"modal title {text!r}", f"containing {SUCCESS_PHRASE!r}", timeout
            )
        self.recorder.emit("modal_open", "confirmation", text.strip())

    def extract(self) -> ConfirmationRecord:
        """
        提取回显表格

        逐行读取 td，少于两个单元格或标签/值为空的行跳过。
        """
        timeout = self.timeout_config.required_wait
        if not self.tab.wait.ele_displayed(self.container, timeout=timeout):
            raise AssertionTimeout("confirmation modal", "visible", timeout)

        body = find_required(self.tab, self.locators.modal['body'], timeout, "modal body")
        rows: List[Tuple[str, str]] = []
        for row in body.eles('tag:tr'):
            cells = row.eles('tag:td')
            if len(cells) < 2:
                continue
            label = (cells[0].text or "").strip()
            value = (cells[1].text or "").strip()
            if label and value:
                rows.append((label, value))

        record = ConfirmationRecord(rows)
        self.recorder.emit("extract", "confirmation", f"{len(record)} row(s)", level="debug")
        return record

    def close(self) -> None:
        """
        点击关闭按钮，弹窗必须随后不可见

        Raises:
            AssertionTimeout: 弹窗在时限内未消失
        """
        timeout = self.timeout_config.required_wait
        find_required(self.tab, self.locators.modal['close'], timeout, "modal close").click(by_js=None)
        if not self.tab.wait.ele_hidden(self.container, timeout=timeout):
            raise AssertionTimeout("confirmation modal", "hidden", timeout)
        self.recorder.emit("modal_close", "confirmation")

    def ensure_closed(self) -> bool:
        """
        守卫操作

        弹窗已关闭时什么也不做；否则依次尝试：点击关闭 -> Escape -> 刷新页面。
        点击关闭或 Escape 出错时改为刷新页面；刷新本身失败则向调用方抛出，
        此时无法保证弹窗已关闭。

        Returns:
            是否执行了关闭动作
        """
        try:
            if not self.is_open():
                return False

            t = self.timeout_config
            self.recorder.emit("guard", "confirmation", "modal unexpectedly open, closing", level="warning")
            close_btn = self.tab.ele(self.locators.modal['close'], timeout=t.guard_click_timeout)
            if close_btn:
                close_btn.click(timeout=t.guard_click_timeout)
            self.tab.wait(t.guard_pause)

            if self.is_open():
                self.recorder.emit("guard", "confirmation", "still open, pressing Escape", level="warning")
                self.tab.actions.key_down(Keys.ESCAPE).key_up(Keys.ESCAPE)
                self.tab.wait(t.escape_pause)

            if self.is_open():
                self._reload("still open after Escape")
        except Exception as e:
            self._reload(f"error while closing: {e}")
        return True

    def _reload(self, reason: str) -> None:
        self.recorder.emit("reload", "page", reason, level="warning")
        self.tab.refresh()
        self.tab.wait(self.timeout_config.reload_settle)
