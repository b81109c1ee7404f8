"""
表单数据与确认弹窗的逐字段核对

比较顺序固定为 fullName -> email -> mobile -> address，
第一个不一致即抛出 MismatchFailure，不汇总多处差异。
"""

from enum import Enum
from typing import Any, Dict, Mapping, Tuple, Union

from formprobe.domain.entities import ConfirmationRecord, FormRecord
from formprobe.domain.entities.confirmation_record import (
    ADDRESS, MOBILE, STUDENT_EMAIL, STUDENT_NAME,
)
from formprobe.domain.exceptions import MismatchFailure

# (期望值键, 弹窗标签)
FIELD_LABELS: Tuple[Tuple[str, str], ...] = (
    ('fullName', STUDENT_NAME),
    ('email', STUDENT_EMAIL),
    ('mobile', MOBILE),
    ('address', ADDRESS),
)


def compose_full_name(first_name: str, last_name: str) -> str:
    """名 + 单个空格 + 姓，不做额外裁剪"""
    return f"{first_name} {last_name}"


def expected_values(source: Union[FormRecord, Mapping[str, Any]]) -> Dict[str, str]:
    """
    由 FormRecord 或表单回读值计算弹窗的期望值

    Args:
        source: FormRecord，或含 firstName/lastName/email/mobile/address 的字典
    """
    if isinstance(source, FormRecord):
        return {
            'fullName': source.full_name,
            'email': source.email,
            'mobile': source.mobile,
            'address': source.address,
        }
    return {
        'fullName': compose_full_name(source.get('firstName', ''), source.get('lastName', '')),
        'email': source.get('email', ''),
        'mobile': source.get('mobile', ''),
        'address': source.get('address', ''),
    }


def reconcile(
    source: Union[FormRecord, Mapping[str, Any]],
    confirmation: ConfirmationRecord
) -> Dict[str, str]:
    """
    核对弹窗回显

    Returns:
        核对通过的期望值

    Raises:
        MismatchFailure: 第一个不一致的字段
    """
    expected = expected_values(source)
    for key, label in FIELD_LABELS:
        actual = confirmation.get(label, "")
        if expected[key] != actual:
            raise MismatchFailure(key, expected[key], actual)
    return expected


def check_contains(expected: Mapping[str, Any], confirmation: ConfirmationRecord) -> None:
    """
    宽松核对：每个非空期望值都出现在某个单元格文本中

    列表/元组取值逐项检查；Gender、Hobby 等枚举按其取值比较。
    """
    texts = confirmation.cell_texts()
    for key, value in expected.items():
        if not value:
            continue
        items = value if isinstance(value, (list, tuple)) else (value,)
        for item in items:
            item = item.value if isinstance(item, Enum) else str(item)
            if not any(item in text for text in texts):
                raise MismatchFailure(key, item, "<not present in confirmation>")
