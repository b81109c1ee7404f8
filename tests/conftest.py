"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置:
- 模拟 DrissionPage 标签页/元素（离线单元测试）
- 模拟练习表单站点（提交后回显确认弹窗）
- 在线用例使用的浏览器/页面 fixtures（默认跳过）
"""

import os
from typing import Any, Callable, Dict, List, Optional

import pytest
from DrissionPage.common import Keys

from formprobe import config
from formprobe.config import BrowserConfig, FillerConfig, TimeoutConfig
from formprobe.core.confirmation import SUCCESS_PHRASE
from formprobe.core.locators import DEMOQA_LOCATORS
from formprobe.data.test_data import STATE_CITY_OPTIONS
from formprobe.utils.logger import setup_logging


def pytest_configure(config):
    """按 FORMPROBE_LOG_LEVEL / FORMPROBE_LOG_FILE 初始化日志"""
    from formprobe import config as probe_config

    setup_logging(
        level=probe_config.run_config.log_level,
        log_file=probe_config.run_config.log_file or None,
    )


def is_key_char(vals: str) -> bool:
    """DrissionPage 的 Keys 取值位于 Unicode 私有区"""
    return bool(vals) and '\ue000' <= vals[0] <= '\uf8ff'


# ============================================================
# Mock Browser Tab
# ============================================================

class MockStates:
    """模拟元素状态"""

    def __init__(self, displayed: bool = True, enabled: bool = True):
        self.is_displayed = displayed
        self.is_enabled = enabled


class MockElement:
    """
    模拟页面元素

    Args:
        value: 输入框初始值
        text: 元素文本
        readbacks: 每次 input 后依次回读的值（模拟页面吞字/改写）
        on_click: 点击回调 (element, by_js) -> None
        on_input: 输入回调 (element, vals) -> None，在默认处理之后调用
        children: 子元素 {定位符: [元素]}
    """

    def __init__(
        self,
        locator: str = '',
        value: str = '',
        text: str = '',
        displayed: bool = True,
        enabled: bool = True,
        attrs: Optional[Dict[str, str]] = None,
        readbacks: Optional[List[str]] = None,
        on_click: Optional[Callable] = None,
        on_input: Optional[Callable] = None,
        children: Optional[Dict[str, List['MockElement']]] = None,
        click_error: Optional[Exception] = None,
    ):
        self.locator = locator
        self._value = value
        self.text = text
        self.states = MockStates(displayed, enabled)
        self.attrs = attrs or {}
        self.readbacks = list(readbacks or [])
        self.on_click = on_click
        self.on_input = on_input
        self.children = children or {}
        self.click_error = click_error
        self.calls: List[tuple] = []

    @property
    def value(self) -> str:
        return self._value

    def attr(self, name: str) -> Optional[str]:
        return self.attrs.get(name)

    def input(self, vals: Any, clear: bool = False):
        self.calls.append(('input', vals, clear))
        if isinstance(vals, str) and not is_key_char(vals):
            new_value = vals if clear else self._value + vals
            if self.readbacks:
                new_value = self.readbacks.pop(0)
            self._value = new_value
        if self.on_input:
            self.on_input(self, vals)
        return self

    def clear(self):
        self.calls.append(('clear',))
        self._value = ''
        return self

    def click(self, by_js: Optional[bool] = False, timeout: float = 1.5):
        self.calls.append(('click', by_js))
        if self.click_error:
            raise self.click_error
        if self.on_click:
            self.on_click(self, by_js)
        return True

    def clicks(self) -> List[tuple]:
        return [c for c in self.calls if c[0] == 'click']

    def inputs(self) -> List[Any]:
        return [c[1] for c in self.calls if c[0] == 'input']

    def ele(self, locator: str, timeout: Optional[float] = None):
        found = self.children.get(locator) or []
        return found[0] if found else None

    def eles(self, locator: str, timeout: Optional[float] = None) -> List['MockElement']:
        return list(self.children.get(locator, []))


class MockWait:
    """模拟 tab.wait：可调用休眠，并提供元素显示/隐藏等待"""

    def __init__(self, tab: 'MockBrowserTab'):
        self.tab = tab
        self.sleeps: List[float] = []

    def __call__(self, second: float, scope: Any = None):
        self.sleeps.append(second)

    def ele_displayed(self, locator: str, timeout: Optional[float] = None, raise_err: Any = None) -> bool:
        ele = self.tab.elements.get(locator)
        return bool(ele) and ele.states.is_displayed

    def ele_hidden(self, locator: str, timeout: Optional[float] = None, raise_err: Any = None) -> bool:
        ele = self.tab.elements.get(locator)
        return not ele or not ele.states.is_displayed


class MockActions:
    """模拟键盘动作链"""

    def __init__(self, tab: 'MockBrowserTab'):
        self.tab = tab
        self.keys: List[tuple] = []

    def key_down(self, key):
        self.keys.append(('down', key))
        if self.tab.on_key:
            self.tab.on_key(key)
        return self

    def key_up(self, key):
        self.keys.append(('up', key))
        return self


class MockBrowserTab:
    """模拟浏览器标签页，用于测试"""

    def __init__(self, title: str = 'DEMOQA'):
        self.title = title
        self.url: Optional[str] = None
        self.elements: Dict[str, MockElement] = {}
        self.js_calls: List[tuple] = []
        self.js_results: Dict[str, Any] = {}
        self.refresh_count = 0
        self.lookups: List[tuple] = []
        self.wait = MockWait(self)
        self.actions = MockActions(self)
        self.on_key: Optional[Callable] = None
        self.on_refresh: Optional[Callable] = None
        self.on_get: Optional[Callable] = None

    def add(self, locator: str, element: Optional[MockElement] = None, **kwargs) -> MockElement:
        element = element or MockElement(locator=locator, **kwargs)
        self.elements[locator] = element
        return element

    def get(self, url: str):
        self.url = url
        if self.on_get:
            self.on_get(self)
        return True

    def ele(self, locator: str, timeout: Optional[float] = None):
        self.lookups.append((locator, timeout))
        return self.elements.get(locator)

    def eles(self, locator: str, timeout: Optional[float] = None) -> List[MockElement]:
        ele = self.elements.get(locator)
        return [ele] if ele else []

    def run_js(self, script: str, *args):
        self.js_calls.append((script, args))
        return self.js_results.get(script)

    def refresh(self):
        self.refresh_count += 1
        if self.on_refresh:
            self.on_refresh(self)

    def side_effects(self) -> List[tuple]:
        """所有元素上的点击/输入、按键与刷新（不含查找）"""
        effects: List[tuple] = []
        for locator, ele in self.elements.items():
            effects.extend((locator,) + call for call in ele.calls)
        effects.extend(('key',) + k for k in self.actions.keys)
        effects.extend(('refresh',) for _ in range(self.refresh_count))
        return effects


# ============================================================
# 模拟练习表单站点
# ============================================================

class FakePracticeForm:
    """
    模拟 DEMOQA 练习表单

    记录性别/爱好/科目/州城市的选择；点击提交后以当前输入值渲染确认弹窗；
    弹窗打开时爱好复选框被遮挡，点击无效。
    """

    def __init__(self, locators=DEMOQA_LOCATORS):
        self.locators = locators
        self.tab = MockBrowserTab()
        self.gender: Optional[str] = None
        self.hobbies: List[str] = []
        self.subjects: List[str] = []
        self.state = ''
        self.city = ''
        self.picture = ''
        self.submissions = 0
        self._build()
        self.tab.on_get = lambda tab: self.reset()

    def reset(self):
        """重新加载页面：清空输入与选择，弹窗关闭"""
        for locator in self.locators.fields.values():
            self.tab.elements[locator]._value = ''
        self.gender = None
        self.hobbies = []
        self.subjects = []
        self.state = self.city = self.picture = ''
        self.hide_modal()

    # ---------- 页面搭建 ----------

    def _build(self):
        L = self.locators
        t = self.tab

        for name, locator in L.fields.items():
            t.add(locator)
        t.elements[L.fields['subjects']].on_input = self._subject_input
        t.elements[L.fields['picture']].on_input = self._picture_input

        for key, locator in L.genders.items():
            t.add(locator, on_click=self._gender_click(key))
        for key, locator in L.hobbies.items():
            t.add(locator, on_click=self._hobby_click(key))

        t.add(L.controls['form'])
        t.add(L.controls['state'])
        t.add(L.controls['city'])
        t.add(L.controls['submit'], on_click=lambda ele, by_js: self.render_modal())
        for state, cities in STATE_CITY_OPTIONS.items():
            t.add(L.option_for('state', state), on_click=self._setter('state', state))
            for city in cities:
                t.add(L.option_for('city', city), on_click=self._setter('city', city))

        t.add(L.modal['container'], displayed=False)
        t.add(L.modal['title'], text=SUCCESS_PHRASE)
        t.add(L.modal['body'])
        t.add(L.modal['close'], on_click=lambda ele, by_js: self.hide_modal())

    def _value(self, name: str) -> str:
        return self.tab.elements[self.locators.fields[name]].value

    def _gender_click(self, key: str):
        def handler(ele, by_js):
            self.gender = key.capitalize()
        return handler

    def _hobby_click(self, key: str):
        def handler(ele, by_js):
            if self.modal_open:
                return
            label = key.capitalize()
            if label in self.hobbies:
                self.hobbies.remove(label)
            else:
                self.hobbies.append(label)
        return handler

    def _setter(self, attr: str, value: str):
        def handler(ele, by_js):
            setattr(self, attr, value)
        return handler

    def _subject_input(self, ele, vals):
        if vals == Keys.ENTER and ele.value:
            self.subjects.append(ele.value)
            ele._value = ''

    def _picture_input(self, ele, vals):
        self.picture = os.path.basename(ele.value)

    # ---------- 确认弹窗 ----------

    @property
    def modal_open(self) -> bool:
        return self.tab.elements[self.locators.modal['container']].states.is_displayed

    def render_modal(self, overrides: Optional[Dict[str, str]] = None):
        self.submissions += 1
        values = {
            'Student Name': f"{self._value('firstName')} {self._value('lastName')}",
            'Student Email': self._value('email'),
            'Gender': self.gender or '',
            'Mobile': self._value('mobile'),
            'Date of Birth': self._value('dateOfBirth'),
            'Subjects': ', '.join(self.subjects),
            'Hobbies': ', '.join(self.hobbies),
            'Picture': self.picture,
            'Address': self._value('address'),
            'State and City': f"{self.state} {self.city}".strip(),
        }
        values.update(overrides or {})
        self.show_modal(values)

    def show_modal(self, values: Dict[str, str]):
        header = MockElement(children={'tag:td': []})
        rows = [header]
        for label, value in values.items():
            rows.append(MockElement(children={'tag:td': [
                MockElement(text=f" {label} "), MockElement(text=value),
            ]}))
        self.tab.elements[self.locators.modal['body']].children = {'tag:tr': rows}
        self.tab.elements[self.locators.modal['container']].states.is_displayed = True

    def hide_modal(self):
        self.tab.elements[self.locators.modal['container']].states.is_displayed = False


# ============================================================
# 配置 Fixtures
# ============================================================

@pytest.fixture
def fast_timeouts():
    """单元测试用的等待配置（数值只用于断言，模拟对象不会真正等待）"""
    return TimeoutConfig(
        optional_wait=0.1,
        required_wait=0.5,
        settle_duration=0.2,
        guard_click_timeout=0.3,
        guard_pause=0.1,
        escape_pause=0.05,
        reload_settle=0.2,
    )


@pytest.fixture
def browser_settings():
    return BrowserConfig(base_url='https://demoqa.example', title_pattern='DEMOQA')


@pytest.fixture
def filler_settings():
    return FillerConfig()


@pytest.fixture
def mock_tab():
    """模拟浏览器标签页"""
    return MockBrowserTab()


@pytest.fixture
def fake_site():
    """模拟练习表单站点"""
    return FakePracticeForm()


@pytest.fixture
def form_page(fake_site, fast_timeouts, browser_settings, filler_settings):
    """挂在模拟站点上的页面对象"""
    from formprobe.core.practice_form_page import PracticeFormPage
    return PracticeFormPage(
        fake_site.tab,
        browser_config=browser_settings,
        timeout_config=fast_timeouts,
        filler_config=filler_settings,
    )


# ============================================================
# FormRecord Fixtures
# ============================================================

@pytest.fixture
def jane_record():
    from formprobe.domain.entities import FormRecord
    return FormRecord(
        first_name='Jane',
        last_name='Smith',
        email='jane.smith@example.com',
        mobile='9876543210',
        gender='Female',
    )


@pytest.fixture
def full_record(tmp_path):
    from formprobe.domain.entities import FormRecord
    picture = tmp_path / 'sample-image.png'
    picture.write_bytes(b'\x89PNG\r\n\x1a\n')
    return FormRecord(
        first_name='Alice',
        last_name='Johnson',
        email='alice.johnson@test.com',
        mobile='5551234567',
        address='456 Oak Avenue, Los Angeles, CA 90210',
        gender='Female',
        date_of_birth='20 Mar 1995',
        subjects=('English',),
        hobbies=('Music', 'Reading'),
        picture_file=str(picture),
        state='Haryana',
        city='Karnal',
    )


# ============================================================
# 在线用例 Fixtures
# ============================================================

@pytest.fixture(scope='session')
def browser_manager():
    """整个会话共用一个浏览器"""
    if not config.run_config.run_e2e:
        pytest.skip('set FORMPROBE_E2E=1 to drive the live practice form')
    from formprobe.infrastructure.browser import BrowserManager

    manager = BrowserManager()
    manager.start()
    yield manager
    manager.quit()


@pytest.fixture
def live_tab(browser_manager):
    """每个场景独立的标签页"""
    tab = browser_manager.new_tab()
    yield tab
    browser_manager.close_tab(tab)


@pytest.fixture
def live_form(live_tab):
    """已导航到表单页的页面对象"""
    from formprobe.core.practice_form_page import PracticeFormPage
    form = PracticeFormPage(live_tab)
    form.navigate_to_form()
    return form


@pytest.fixture
def reqres_client():
    if not config.run_config.run_api:
        pytest.skip('set FORMPROBE_API=1 to call the live ReqRes API')
    from formprobe.infrastructure.http import ReqResClient
    with ReqResClient() as client:
        yield client


@pytest.fixture
def test_assets(tmp_path):
    """上传用例使用的文件"""
    document = tmp_path / 'test-document.txt'
    document.write_text('formprobe upload fixture\n', encoding='utf-8')
    image = tmp_path / 'sample-image.png'
    image.write_bytes(
        b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01'
        b'\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f'
        b'\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82'
    )
    return {'document': str(document), 'image': str(image)}
