"""
表单提交服务

封装一次完整的 校验 -> 填写 -> 提交 -> 核对 -> 关闭 流程。
"""

from typing import Iterable, List

from formprobe.core.practice_form_page import PracticeFormPage
from formprobe.domain.entities import FormRecord, SubmissionResult


class FormSubmissionService:
    """
    表单提交服务

    职责:
    - 在页面操作之前完成数据校验
    - 按记录填写并提交表单
    - 核对确认弹窗并关闭，页面回到可提交状态
    """

    def __init__(self, form: PracticeFormPage):
        """
        初始化提交服务

        Args:
            form: 已导航到表单页的页面对象
        """
        self.form = form

    def submit(self, record: FormRecord, validate: bool = True) -> SubmissionResult:
        """
        提交单条记录

        Args:
            record: 表单记录
            validate: 是否先做必填字段校验（校验失败时不会触碰页面）

        Returns:
            提交结果

        Raises:
            ValidationFailure: 数据不合法
            AssertionTimeout: 必需元素/弹窗未出现
            MismatchFailure: 弹窗回显不一致
        """
        if validate:
            self.form.validate_required_fields_data(record)

        start = len(self.form.events)
        self.form.fill_form(record)
        self.form.submit_form()
        self.form.wait_for_confirmation()
        confirmation = self.form.validate_record_matches_modal(record)
        self.form.close_modal()
        return SubmissionResult(
            record=record,
            confirmation=confirmation,
            events=list(self.form.events[start:]),
        )

    def submit_many(self, records: Iterable[FormRecord], validate: bool = True) -> List[SubmissionResult]:
        """
        依次提交多条记录，每条之间重新导航到表单页

        第一处失败即中止，不汇总后续记录。
        """
        results: List[SubmissionResult] = []
        for index, record in enumerate(records):
            if index > 0:
                self.form.navigate_to_form()
            results.append(self.submit(record, validate=validate))
        return results
