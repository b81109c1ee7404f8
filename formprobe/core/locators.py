"""
页面定位符表

把逻辑字段名映射到 DrissionPage 定位符，构造页面对象时注入。
需要适配其他页面布局时，只需提供另一份 PageLocators，逻辑代码不变。
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


def _frozen(data: dict) -> Mapping[str, str]:
    return MappingProxyType(dict(data))


def xpath_literal(text: str) -> str:
    """
    把任意文字转换为 XPath 1.0 字符串字面量

    XPath 字面量内没有转义符，同时含两种引号时用 concat() 拼接。
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = text.split('"')
    pieces = []
    for index, part in enumerate(parts):
        if index:
            pieces.append("'\"'")
        if part:
            pieces.append(f'"{part}"')
    return f"concat({', '.join(pieces)})"


@dataclass(frozen=True)
class PageLocators:
    """
    定位符表（只读）

    Attributes:
        fields: 文本输入框（firstName、lastName、email、mobile、address、dateOfBirth、subjects、picture）
        genders: 性别单选框，键为小写取值
        hobbies: 爱好复选框标签，键为小写取值
        controls: 表单容器、下拉框、提交按钮等
        modal: 确认弹窗容器、标题、正文、关闭按钮
        state_option / city_option: 下拉选项定位模板，{text} 替换为带引号的 XPath 字符串字面量
        interference_removed: 导航后直接从 DOM 移除的遮挡元素（CSS 选择器）
        overlay_close: 可能出现的弹窗关闭按钮，逐个尝试点击
        interference_hidden: 以 display:none 隐藏的广告元素（CSS 选择器）
    """
    fields: Mapping[str, str] = field(default_factory=dict)
    genders: Mapping[str, str] = field(default_factory=dict)
    hobbies: Mapping[str, str] = field(default_factory=dict)
    controls: Mapping[str, str] = field(default_factory=dict)
    modal: Mapping[str, str] = field(default_factory=dict)
    state_option: str = ""
    city_option: str = ""
    interference_removed: Tuple[str, ...] = ()
    overlay_close: Tuple[str, ...] = ()
    interference_hidden: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ('fields', 'genders', 'hobbies', 'controls', 'modal'):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        for name in ('interference_removed', 'overlay_close', 'interference_hidden'):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def locator_for(self, name: str) -> str:
        return self.fields[name]

    def control(self, name: str) -> str:
        return self.controls[name]

    def option_for(self, dropdown: str, text: str) -> str:
        template = self.state_option if dropdown == 'state' else self.city_option
        return template.format(text=xpath_literal(text))


# ============================================================
# DEMOQA 练习表单
# ============================================================

DEMOQA_LOCATORS = PageLocators(
    fields={
        'firstName': '#firstName',
        'lastName': '#lastName',
        'email': '#userEmail',
        'mobile': '#userNumber',
        'address': '#currentAddress',
        'dateOfBirth': '#dateOfBirthInput',
        'subjects': '#subjectsInput',
        'picture': '#uploadPicture',
    },
    genders={
        'male': 'css:input#gender-radio-1',
        'female': 'css:input#gender-radio-2',
        'other': 'css:input#gender-radio-3',
    },
    hobbies={
        'sports': 'css:label[for="hobbies-checkbox-1"]',
        'reading': 'css:label[for="hobbies-checkbox-2"]',
        'music': 'css:label[for="hobbies-checkbox-3"]',
    },
    controls={
        'form': '#userForm',
        'state': '#state',
        'city': '#city',
        'submit': '#submit',
    },
    modal={
        'container': 'css:.modal-dialog',
        'title': 'css:.modal-title',
        'body': 'css:.modal-body',
        'close': '#closeLargeModal',
    },
    state_option='xpath://div[starts-with(@id,"react-select-3-option-")][contains(., {text})]',
    city_option='xpath://div[starts-with(@id,"react-select-4-option-")][contains(., {text})]',
    interference_removed=(
        '#ad_position_box',
        '#fixedban',
        '.Advertisement-Section',
        '.ad-container',
        '.Google-Ad',
    ),
    overlay_close=(
        'css:.modal-dialog .close',
        'css:.popup-close',
        'css:.advertisement-close',
        'css:[aria-label="Close"]',
        'css:.close-button',
    ),
    interference_hidden=(
        'iframe[src*="googlesyndication"]',
        'iframe[src*="doubleclick"]',
        '[id*="google_ads"]',
        '[class*="advertisement"]',
        '#fixedban',
    ),
)

# 导航后必须可见且可编辑的必填字段
REQUIRED_FIELDS: Tuple[str, ...] = ('firstName', 'lastName', 'email', 'mobile', 'address')
