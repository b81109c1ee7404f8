"""
选项类字段填充器

- 性别: 互斥单选，大小写不敏感，未知取值在点击前抛出 InvalidChoice
- 爱好: 可多选；每次点击前先执行守卫操作，确保确认弹窗没有遮挡
- 科目: 自动补全输入，输入文字后按 Enter 生成标签
- 州/城市: 先点开下拉框，再点击文字匹配的选项；两者是否匹配由调用方保证
- 出生日期: 全选清空后重新输入，按 Tab 关闭日期选择器
- 照片: 把本地路径交给文件上传控件，不做类型/大小检查
"""

import os
from typing import Any, Callable, Optional

from DrissionPage.common import Keys

from formprobe import config
from formprobe.config import TimeoutConfig
from formprobe.core.element_access import find_required
from formprobe.core.locators import PageLocators
from formprobe.core.recorder import InteractionRecorder
from formprobe.domain.entities import Gender, Hobby
from formprobe.domain.interfaces import IBrowserTab


class ChoiceFiller:
    """选项类字段填充器"""

    def __init__(
        self,
        tab: IBrowserTab,
        locators: PageLocators,
        recorder: InteractionRecorder,
        guard: Callable[[], Any],
        timeout_config: Optional[TimeoutConfig] = None
    ):
        """
        Args:
            tab: DrissionPage 的 tab 对象
            locators: 定位符表
            recorder: 事件记录器
            guard: 守卫操作，点击爱好前调用
            timeout_config: 等待时间配置
        """
        self.tab = tab
        self.locators = locators
        self.recorder = recorder
        self.guard = guard
        self.timeout_config = timeout_config or config.timeout_config

    def _find(self, locator: str, target: str) -> Any:
        return find_required(self.tab, locator, self.timeout_config.required_wait, target)

    def select_gender(self, gender: Any) -> Gender:
        choice = Gender.parse(gender)
        ele = self._find(self.locators.genders[choice.value.lower()], f"gender:{choice.value}")
        ele.click(by_js=True)
        self.recorder.emit("click", "gender", choice.value)
        return choice

    def select_hobby(self, hobby: Any) -> Hobby:
        choice = Hobby.parse(hobby)
        self.guard()
        ele = self._find(self.locators.hobbies[choice.value.lower()], f"hobby:{choice.value}")
        ele.click(by_js=True)
        self.recorder.emit("click", "hobby", choice.value)
        return choice

    def select_subject(self, subject: str) -> None:
        ele = self._find(self.locators.locator_for('subjects'), 'subjects')
        ele.click()
        ele.input(subject)
        ele.input(Keys.ENTER)
        self.recorder.emit("select", "subjects", subject)

    def select_dropdown(self, dropdown: str, text: str) -> None:
        """
        选择 react-select 下拉项

        Args:
            dropdown: 'state' 或 'city'
            text: 选项可见文字
        """
        self._find(self.locators.control(dropdown), dropdown).click()
        option = self._find(self.locators.option_for(dropdown, text), f"{dropdown}:{text}")
        option.click()
        self.recorder.emit("select", dropdown, text)

    def fill_date_of_birth(self, date: str) -> None:
        ele = self._find(self.locators.locator_for('dateOfBirth'), 'dateOfBirth')
        ele.click()
        ele.input(Keys.CTRL_A)
        ele.input(Keys.DELETE)
        ele.input(date)
        ele.input(Keys.TAB)
        self.recorder.emit("fill", "dateOfBirth", date)

    def upload_picture(self, file_path: str) -> str:
        path = os.path.abspath(file_path)
        ele = self._find(self.locators.locator_for('picture'), 'picture')
        ele.input(path)
        self.recorder.emit("upload", "picture", path)
        return path
