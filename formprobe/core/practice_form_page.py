"""
DEMOQA 练习表单页面对象

门面类，组合导航、填充、确认弹窗与核对组件，对外提供与测试场景
一一对应的操作。所有操作都记录为 InteractionEvent（见 events）。

使用示例:
    form = PracticeFormPage(tab)
    form.navigate_to_form()
    form.fill_first_name('John')
    form.fill_last_name('Doe')
    form.fill_email('john.doe@example.com')
    form.select_gender('Male')
    form.fill_mobile_number('1234567890')
    form.submit_form()
    form.validate_form_data_matches_modal()
    form.close_modal()
"""

import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from formprobe.config import BrowserConfig, FillerConfig, TimeoutConfig
from formprobe.core.confirmation import ConfirmationModal
from formprobe.core.element_access import find_required
from formprobe.core.filler import ChoiceFiller, VerifiedTextFiller
from formprobe.core.locators import DEMOQA_LOCATORS, PageLocators
from formprobe.core.page_readiness import PageReadiness
from formprobe.core.reconciliation import check_contains, reconcile
from formprobe.core.recorder import InteractionRecorder
from formprobe.domain.entities import (
    ConfirmationRecord, FormRecord, InteractionEvent, SweepReport,
)
from formprobe.domain.entities.confirmation_record import PICTURE
from formprobe.domain.interfaces import IBrowserTab
from formprobe.domain.validation import validate_mobile, validate_required_fields


class PracticeFormPage:
    """练习表单页面对象"""

    def __init__(
        self,
        tab: IBrowserTab,
        locators: PageLocators = DEMOQA_LOCATORS,
        browser_config: Optional[BrowserConfig] = None,
        timeout_config: Optional[TimeoutConfig] = None,
        filler_config: Optional[FillerConfig] = None,
        observer: Optional[Callable[[InteractionEvent], None]] = None
    ):
        """
        Args:
            tab: DrissionPage 的 tab 对象
            locators: 定位符表，替换即可适配其他布局
            browser_config / timeout_config / filler_config: 配置（默认全局配置）
            observer: 事件观察者，实时接收每个 InteractionEvent
        """
        self.tab = tab
        self.locators = locators
        self.recorder = InteractionRecorder(__name__, observer)
        self.readiness = PageReadiness(tab, locators, self.recorder, browser_config, timeout_config)
        self.modal = ConfirmationModal(tab, locators, self.recorder, timeout_config)
        self.text = VerifiedTextFiller(tab, locators, self.recorder, filler_config, timeout_config)
        self.choices = ChoiceFiller(
            tab, locators, self.recorder, self.modal.ensure_closed, timeout_config
        )

    @property
    def events(self) -> List[InteractionEvent]:
        return self.recorder.events

    # =============================================
    # 导航与页面就绪
    # =============================================

    def navigate_to_form(self) -> SweepReport:
        return self.readiness.navigate()

    def handle_ads_and_overlays(self) -> SweepReport:
        return self.readiness.sweep()

    def validate_required_elements_presence(self) -> None:
        self.readiness.validate_required_elements()

    # =============================================
    # 文本字段
    # =============================================

    def fill_first_name(self, first_name: str) -> None:
        self.text.fill('firstName', first_name)

    def fill_last_name(self, last_name: str) -> None:
        self.text.fill('lastName', last_name)

    def fill_email(self, email: str) -> None:
        self.text.fill('email', email)

    def fill_mobile_number(self, mobile_number: str) -> None:
        self.text.fill('mobile', mobile_number, wait_visible=True)

    def fill_current_address(self, address: str) -> None:
        self.text.fill('address', address)

    def fill_date_of_birth(self, date: str) -> None:
        self.choices.fill_date_of_birth(date)

    # =============================================
    # 选项字段
    # =============================================

    def select_gender(self, gender: Any) -> None:
        self.choices.select_gender(gender)

    def select_subject(self, subject: str) -> None:
        self.choices.select_subject(subject)

    def select_hobby(self, hobby: Any) -> None:
        self.choices.select_hobby(hobby)

    def upload_picture(self, file_path: str) -> None:
        self.choices.upload_picture(file_path)

    def select_state(self, state: str) -> None:
        self.choices.select_dropdown('state', state)

    def select_city(self, city: str) -> None:
        self.choices.select_dropdown('city', city)

    def fill_form(self, record: FormRecord) -> None:
        """按页面顺序填写记录中提供的所有字段"""
        self.fill_first_name(record.first_name)
        self.fill_last_name(record.last_name)
        self.fill_email(record.email)
        if record.gender is not None:
            self.select_gender(record.gender)
        self.fill_mobile_number(record.mobile)
        if record.date_of_birth:
            self.fill_date_of_birth(record.date_of_birth)
        for subject in record.subjects:
            self.select_subject(subject)
        for hobby in record.hobbies:
            self.select_hobby(hobby)
        if record.picture_file:
            self.upload_picture(record.picture_file)
        if record.address:
            self.fill_current_address(record.address)
        if record.state:
            self.select_state(record.state)
        if record.city:
            self.select_city(record.city)

    def submit_form(self) -> None:
        submit = find_required(
            self.tab, self.locators.control('submit'),
            self.modal.timeout_config.required_wait, 'submit'
        )
        submit.click(by_js=None)
        self.recorder.emit("submit", "form")

    # =============================================
    # 前置数据校验
    # =============================================

    def validate_mobile_format(self, mobile: str) -> bool:
        valid = validate_mobile(mobile)
        self.recorder.emit(
            "validate", "mobile",
            f"{mobile!r} {'valid' if valid else 'invalid (must be exactly 10 digits)'}",
            level="debug" if valid else "warning",
        )
        return valid

    def validate_required_fields_data(self, data: Union[FormRecord, Mapping[str, Any]]) -> None:
        validate_required_fields(data)
        self.recorder.emit("validate", "required fields", "all valid", level="success")

    # =============================================
    # 提交数据核对
    # =============================================

    def get_form_values(self) -> Dict[str, str]:
        return {
            name: self.text.read(name).value
            for name in ('firstName', 'lastName', 'email', 'mobile', 'address')
        }

    def get_modal_values(self) -> ConfirmationRecord:
        return self.modal.extract()

    def validate_form_data_matches_modal(self) -> Dict[str, Any]:
        """以表单当前回读值为准核对弹窗"""
        form_data = self.get_form_values()
        modal_data = self.get_modal_values()
        reconcile(form_data, modal_data)
        self.recorder.emit("reconcile", "confirmation", "form data matches modal", level="success")
        return {'form_data': form_data, 'modal_data': modal_data, 'is_valid': True}

    def validate_record_matches_modal(self, record: FormRecord) -> ConfirmationRecord:
        """以调用方的 FormRecord 为准核对弹窗"""
        modal_data = self.get_modal_values()
        reconcile(record, modal_data)
        self.recorder.emit("reconcile", "confirmation", "record matches modal", level="success")
        return modal_data

    def validate_submission(self, expected: Mapping[str, Any]) -> ConfirmationRecord:
        """弹窗出现、标题正确，且每个非空期望值都出现在表格中"""
        self.modal.wait_until_open()
        modal_data = self.get_modal_values()
        check_contains(expected, modal_data)
        return modal_data

    def validate_uploaded_file(self, file_name: str) -> bool:
        actual = self.get_modal_values().get(PICTURE)
        ok = actual == os.path.basename(file_name)
        self.recorder.emit(
            "validate", "picture", f"{actual!r}", level="success" if ok else "warning"
        )
        return ok

    # =============================================
    # 确认弹窗
    # =============================================

    def wait_for_confirmation(self) -> None:
        self.modal.wait_until_open()

    def close_modal(self) -> None:
        self.modal.close()

    def ensure_no_modal_open(self) -> bool:
        return self.modal.ensure_closed()
