"""
formprobe 日志系统

提供统一的日志接口，支持:
- 标准 Python logging 模块
- success 级别
- 文件日志输出

用法:
    from formprobe.utils.logger import get_logger, setup_logging

    # 初始化日志系统（pytest 会话启动时由 conftest 调用）
    setup_logging("DEBUG", log_file="logs/run.log")

    # 获取模块日志器
    logger = get_logger(__name__)
    logger.info("开始填写表单")
    logger.success("表单数据与弹窗一致")

结构化的交互事件及其回调见 formprobe.core.recorder。
"""

import logging
import sys
from typing import Optional, Union
from pathlib import Path


# 日志格式
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TIME_FORMAT = "%H:%M:%S"

# 输出过多的第三方库
NOISY_LOGGERS = ('urllib3', 'DrissionPage', 'faker')


class ProbeLogger:
    """
    formprobe 日志封装

    在标准 logging 基础上增加 success 级别（介于 info 和 warning 之间）。
    """

    SUCCESS_LEVEL = 25

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

        if logging.getLevelName(self.SUCCESS_LEVEL) != 'SUCCESS':
            logging.addLevelName(self.SUCCESS_LEVEL, 'SUCCESS')

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def success(self, message: str):
        """成功级别日志（带 ✅ 前缀）"""
        self.logger.log(self.SUCCESS_LEVEL, f"✅ {message}")

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def critical(self, message: str):
        self.logger.critical(message)


def resolve_level(level: Union[int, str]) -> int:
    """
    把级别名（不区分大小写）转换为 logging 数值级别

    未知名称按 INFO 处理。
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT
):
    """
    初始化日志系统

    Args:
        level: 日志级别，数值或名称（"DEBUG"、"success" 等）
        log_file: 日志文件路径（可选）
        format_string: 日志格式
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=resolve_level(level),
        format=format_string,
        datefmt=TIME_FORMAT,
        handlers=handlers,
        force=True
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> ProbeLogger:
    """获取模块日志器"""
    return ProbeLogger(name)
