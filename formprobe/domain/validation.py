"""
前置数据校验

在任何页面操作之前校验调用方提供的数据，失败抛出 ValidationFailure。
"""

import re
from typing import Any, Mapping, Union

from .entities import FormRecord
from .exceptions import ValidationFailure

# 恰好 10 位 ASCII 数字（\d 会匹配全角等 Unicode 数字，这里不用）
MOBILE_PATTERN = re.compile(r"[0-9]{10}")
# 一个 @，两侧均非空白，@ 之后至少一个 "."
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_mobile(mobile: Any) -> bool:
    """手机号是否恰好为 10 位数字"""
    return isinstance(mobile, str) and MOBILE_PATTERN.fullmatch(mobile) is not None


def validate_email(email: Any) -> bool:
    """邮箱是否符合基本格式"""
    return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None


def _is_blank(value: Any) -> bool:
    return not value or not str(value).strip()


def validate_required_fields(data: Union[FormRecord, Mapping[str, Any]]) -> None:
    """
    校验必填字段

    Args:
        data: FormRecord 或含 firstName/lastName/email/mobile/address 的字典

    Raises:
        ValidationFailure: 第一个不合法的字段
    """
    if isinstance(data, FormRecord):
        values = data.required_values()
    else:
        values = {
            'firstName': data.get('firstName', ''),
            'lastName': data.get('lastName', ''),
            'email': data.get('email', ''),
            'mobile': data.get('mobile', data.get('mobileNumber', '')),
            'address': data.get('address', data.get('currentAddress', '')),
        }

    if _is_blank(values['firstName']):
        raise ValidationFailure('firstName', 'firstName is required and cannot be empty')
    if _is_blank(values['lastName']):
        raise ValidationFailure('lastName', 'lastName is required and cannot be empty')
    if not validate_email(values['email']):
        raise ValidationFailure('email', f"email must be a valid address: {values['email']!r}")
    if not validate_mobile(values['mobile']):
        raise ValidationFailure('mobile', f"mobile must be exactly 10 digits: {values['mobile']!r}")
    if _is_blank(values['address']):
        raise ValidationFailure('address', 'address is required and cannot be empty')
