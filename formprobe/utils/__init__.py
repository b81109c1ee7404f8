"""
Utils 模块初始化文件
"""

from .logger import ProbeLogger, get_logger, setup_logging

__all__ = [
    'ProbeLogger',
    'get_logger',
    'setup_logging',
]
