"""
Filler 模块

提供表单填充功能，包括：
- VerifiedTextFiller: 带回读校验的文本框填充器
- ChoiceFiller: 单选/多选/下拉/日期/上传等选项类字段填充器

使用示例:
    from formprobe.core.filler import VerifiedTextFiller

    filler = VerifiedTextFiller(tab, DEMOQA_LOCATORS, recorder)
    filler.fill('firstName', 'John')
"""

from .text_filler import VerifiedTextFiller
from .choice_filler import ChoiceFiller

__all__ = [
    'VerifiedTextFiller',
    'ChoiceFiller',
]
