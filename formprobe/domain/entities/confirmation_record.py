"""
确认弹窗数据模型

提交成功后页面弹出的两列表格（标签 -> 值），回显页面收到的数据。
只在弹窗可见期间存在，关闭后即丢弃。
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple


# 必填字段 -> 弹窗标签
STUDENT_NAME = "Student Name"
STUDENT_EMAIL = "Student Email"
MOBILE = "Mobile"
ADDRESS = "Address"
PICTURE = "Picture"


class ConfirmationRecord(Mapping):
    """
    确认弹窗记录

    只读映射，缺失的标签按空字符串处理（get 默认值为 ""）。
    """

    def __init__(self, rows: Iterable[Tuple[str, str]] = ()):
        data: Dict[str, str] = {}
        for label, value in rows:
            data[label] = value
        self._data = MappingProxyType(data)

    def __getitem__(self, label: str) -> str:
        return self._data[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def get(self, label: str, default: str = "") -> str:
        return self._data.get(label, default)

    def cell_texts(self) -> Tuple[str, ...]:
        """所有单元格文本（标签与值），用于包含性检查"""
        texts = []
        for label, value in self._data.items():
            texts.append(label)
            texts.append(value)
        return tuple(texts)

    def to_dict(self) -> dict:
        return dict(self._data)

    def __repr__(self) -> str:
        return f"ConfirmationRecord({dict(self._data)!r})"
