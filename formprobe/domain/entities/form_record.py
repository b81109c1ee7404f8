"""
表单数据模型

包含:
- Gender / Hobby: 固定取值集合的选项字段
- FormRecord: 调用方要写入表单的一组值（只读）
- FieldState: 某个输入框回读得到的当前值
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from ..exceptions import InvalidChoice


class _Choice(str, Enum):
    """大小写不敏感解析的选项基类"""

    @classmethod
    def parse(cls, value: Any) -> '_Choice':
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise InvalidChoice(cls.field_name(), str(value), [m.value for m in cls])

    @classmethod
    def field_name(cls) -> str:
        return cls.__name__.lower()


class Gender(_Choice):
    """性别（互斥单选）"""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Hobby(_Choice):
    """爱好（可多选）"""
    SPORTS = "Sports"
    READING = "Reading"
    MUSIC = "Music"


# 夹具数据使用的驼峰键 -> FormRecord 字段名
_FIXTURE_KEYS: Dict[str, str] = {
    'firstName': 'first_name',
    'lastName': 'last_name',
    'email': 'email',
    'mobile': 'mobile',
    'mobileNumber': 'mobile',
    'address': 'address',
    'currentAddress': 'address',
    'gender': 'gender',
    'dateOfBirth': 'date_of_birth',
    'subjects': 'subjects',
    'subject': 'subjects',
    'hobbies': 'hobbies',
    'pictureFile': 'picture_file',
    'state': 'state',
    'city': 'city',
}


@dataclass(frozen=True)
class FormRecord:
    """
    表单记录

    调用方在交互开始前构造，核心逻辑只读不改。

    Attributes:
        first_name / last_name / email / mobile / address: 必填字段
        gender: 性别（可选）
        date_of_birth: 出生日期，格式如 "15 Jul 1990"
        subjects: 科目，按输入顺序
        hobbies: 爱好
        picture_file: 要上传的本地文件路径
        state / city: 州与城市，兼容性由调用方保证
    """
    first_name: str
    last_name: str
    email: str
    mobile: str
    address: str = ""
    gender: Optional[Gender] = None
    date_of_birth: Optional[str] = None
    subjects: Tuple[str, ...] = field(default_factory=tuple)
    hobbies: Tuple[Hobby, ...] = field(default_factory=tuple)
    picture_file: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None

    def __post_init__(self):
        # 允许以字符串/列表构造，统一规范化为枚举和元组
        if self.gender is not None and not isinstance(self.gender, Gender):
            object.__setattr__(self, 'gender', Gender.parse(self.gender))
        if isinstance(self.subjects, str):
            object.__setattr__(self, 'subjects', (self.subjects,))
        else:
            object.__setattr__(self, 'subjects', tuple(self.subjects))
        hobbies = (self.hobbies,) if isinstance(self.hobbies, str) else self.hobbies
        object.__setattr__(self, 'hobbies', tuple(Hobby.parse(h) for h in hobbies))

    @property
    def full_name(self) -> str:
        """弹窗中 Student Name 的期望值：名 + 单个空格 + 姓"""
        return f"{self.first_name} {self.last_name}"

    def required_values(self) -> Dict[str, str]:
        """必填字段的原始值"""
        return {
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'mobile': self.mobile,
            'address': self.address,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'FormRecord':
        """
        从夹具字典构造

        同时接受驼峰键（firstName、mobileNumber、currentAddress）
        和下划线字段名，未知键忽略。
        """
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _FIXTURE_KEYS.get(key, key)
            if name in cls.__dataclass_fields__:
                kwargs[name] = value
        for required in ('first_name', 'last_name', 'email', 'mobile'):
            kwargs.setdefault(required, "")
        return cls(**kwargs)


@dataclass(frozen=True)
class FieldState:
    """输入框回读结果"""
    name: str
    value: str

    def matches(self, expected: str) -> bool:
        return self.value == expected
