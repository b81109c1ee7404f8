"""
练习表单页面对象单元测试

在模拟站点上走完整的 导航 -> 填写 -> 提交 -> 核对 -> 关闭 流程。
"""

from dataclasses import replace

import pytest
from formprobe.core.locators import DEMOQA_LOCATORS
from formprobe.core.practice_form_page import PracticeFormPage
from formprobe.domain.exceptions import (
    AssertionTimeout, InvalidChoice, MismatchFailure, ValidationFailure,
)
from formprobe.data.test_data import INVALID_FORM_DATA, VALID_FORM_DATA

L = DEMOQA_LOCATORS


class TestBasicSubmission:
    """基础提交场景"""

    def test_jane_smith_round_trip(self, fake_site, form_page, jane_record):
        form_page.navigate_to_form()
        form_page.fill_first_name('Jane')
        form_page.fill_last_name('Smith')
        form_page.fill_email('jane.smith@example.com')
        form_page.select_gender('Female')
        form_page.fill_mobile_number('9876543210')
        form_page.submit_form()
        form_page.wait_for_confirmation()

        result = form_page.validate_form_data_matches_modal()

        assert result['is_valid'] is True
        assert result['modal_data']['Student Name'] == 'Jane Smith'
        assert result['modal_data']['Gender'] == 'Female'
        form_page.validate_record_matches_modal(jane_record)

        form_page.close_modal()
        assert not fake_site.modal_open

    def test_fill_form_with_all_fields(self, fake_site, form_page, full_record):
        form_page.navigate_to_form()
        form_page.fill_form(full_record)
        form_page.submit_form()

        confirmation = form_page.validate_submission({
            'name': full_record.full_name,
            'gender': full_record.gender,
            'subjects': list(full_record.subjects),
            'hobbies': list(full_record.hobbies),
            'state': full_record.state,
            'city': full_record.city,
        })

        assert confirmation['Hobbies'] == 'Music, Reading'
        assert confirmation['State and City'] == 'Haryana Karnal'
        assert confirmation['Date of Birth'] == '20 Mar 1995'
        assert form_page.validate_uploaded_file(full_record.picture_file) is True

    def test_get_form_values(self, form_page):
        form_page.fill_first_name('John')
        form_page.fill_current_address('Somewhere 1')

        values = form_page.get_form_values()

        assert values['firstName'] == 'John'
        assert values['address'] == 'Somewhere 1'
        assert values['email'] == ''


class TestFailures:

    def test_submit_without_confirmation_times_out(self, fake_site, form_page):
        fake_site.tab.elements[L.control('submit')].on_click = None
        form_page.submit_form()

        with pytest.raises(AssertionTimeout):
            form_page.wait_for_confirmation()

    def test_echo_mismatch_detected(self, fake_site, form_page):
        form_page.fill_first_name('John')
        form_page.fill_last_name('Doe')
        fake_site.render_modal(overrides={'Student Name': 'Jon Doe'})

        with pytest.raises(MismatchFailure) as exc_info:
            form_page.validate_form_data_matches_modal()

        assert exc_info.value.field == 'fullName'

    def test_invalid_gender_leaves_page_untouched(self, fake_site, form_page):
        with pytest.raises(InvalidChoice):
            form_page.select_gender('banana')

        assert fake_site.gender is None
        assert fake_site.tab.side_effects() == []

    def test_wrong_uploaded_file_reported(self, fake_site, form_page):
        fake_site.show_modal({'Picture': 'other.png'})

        assert form_page.validate_uploaded_file('/tmp/sample-image.png') is False


class TestGuardDuringHobbies:
    """确认弹窗遮挡爱好复选框"""

    def test_leftover_modal_closed_before_hobby_clicks(self, fake_site, form_page):
        fake_site.show_modal({'Student Name': 'Previous Run'})

        form_page.select_hobby('Sports')
        form_page.select_hobby('Music')

        assert not fake_site.modal_open
        assert fake_site.hobbies == ['Sports', 'Music']
        guard_events = [e for e in form_page.events if e.action == 'guard']
        assert len(guard_events) == 1

    def test_ensure_no_modal_open_is_idempotent(self, fake_site, form_page):
        assert form_page.ensure_no_modal_open() is False
        assert form_page.ensure_no_modal_open() is False
        assert fake_site.tab.side_effects() == []


class TestDataValidation:

    def test_mobile_format(self, form_page):
        assert form_page.validate_mobile_format('1234567890') is True
        assert form_page.validate_mobile_format('12345') is False
        assert form_page.events[-1].level == 'warning'

    def test_required_fields_valid(self, form_page):
        form_page.validate_required_fields_data(VALID_FORM_DATA)

        assert form_page.events[-1].level == 'success'

    def test_required_fields_invalid(self, fake_site, form_page):
        with pytest.raises(ValidationFailure):
            form_page.validate_required_fields_data(INVALID_FORM_DATA)

        assert fake_site.tab.side_effects() == []


class TestEvents:

    def test_observer_receives_every_event(self, fake_site, fast_timeouts, browser_settings):
        received = []
        page = PracticeFormPage(
            fake_site.tab,
            browser_config=browser_settings,
            timeout_config=fast_timeouts,
            observer=received.append,
        )

        page.fill_first_name('John')
        page.select_gender('Male')

        assert [e.action for e in received] == ['fill', 'click']
        assert received == page.events

    def test_failing_observer_does_not_break_page(self, fake_site, fast_timeouts):
        def bad_observer(event):
            raise RuntimeError('observer down')

        page = PracticeFormPage(fake_site.tab, timeout_config=fast_timeouts, observer=bad_observer)

        page.fill_first_name('John')

        assert page.get_form_values()['firstName'] == 'John'

    def test_custom_locators(self, mock_tab, fast_timeouts):
        """替换定位符表即可适配其他布局"""
        custom = replace(L, fields=dict(L.fields, firstName='#given-name'))
        ele = mock_tab.add('#given-name')
        page = PracticeFormPage(mock_tab, locators=custom, timeout_config=fast_timeouts)

        page.fill_first_name('John')

        assert ele.value == 'John'
