"""
formprobe 配置中心

集中管理所有可配置参数，避免超时、地址等硬编码散落在各模块中。
支持从环境变量读取配置。

用法:
    from formprobe.config import browser_config, timeout_config, filler_config

    # 访问配置
    timeout = timeout_config.required_wait
    attempts = filler_config.max_fill_attempts
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class BrowserConfig:
    """
    浏览器配置

    控制 Chromium 启动方式以及被测站点地址。
    """
    local_port: int = 9333                  # 自动化浏览器调试端口
    headless: bool = True                   # 无头模式
    window_size: str = "1920,1080"          # 窗口大小，避免布局塌缩遮挡表单
    base_url: str = "https://demoqa.com"    # 被测站点
    form_path: str = "/automation-practice-form"
    title_pattern: str = "DEMOQA"           # 页面标题校验（正则）
    browser_path: Optional[str] = None      # 浏览器路径（可选，默认自动寻找）

    @property
    def form_url(self) -> str:
        return self.base_url.rstrip('/') + self.form_path


@dataclass
class TimeoutConfig:
    """
    等待时间配置（秒）

    可选元素（广告、弹窗）超时被视为"不存在"；
    必需元素超时则直接判定用例失败。
    """
    optional_wait: float = 1.0          # 可选弹窗可见性检测超时
    required_wait: float = 10.0         # 必需元素/状态等待超时
    settle_duration: float = 2.0        # 导航后等待广告加载的时间
    guard_click_timeout: float = 2.0    # 守卫操作点击关闭按钮的超时
    guard_pause: float = 1.0            # 点击关闭后的等待
    escape_pause: float = 0.5           # 按下 Escape 后的等待
    reload_settle: float = 2.0          # 刷新页面后的等待


@dataclass
class FillerConfig:
    """
    填充器配置

    控制文本框填充与回读校验的行为参数。
    """
    max_fill_attempts: int = 2          # 总填充次数（含首次），2 即失败后重填一次
    verify_final_value: bool = True     # 最后一次填充后是否仍要求回读一致


@dataclass
class ApiConfig:
    """
    API 测试配置

    ReqRes 公共沙箱的访问参数。
    """
    base_url: str = "https://reqres.in/api"
    api_key: str = ""                   # 非空时作为 x-api-key 请求头
    timeout: float = 15.0               # 单次请求超时(秒)
    created_at_tolerance: float = 60.0  # createdAt 与本地时间的最大差值(秒)


@dataclass
class RunConfig:
    """
    运行开关

    在线用例默认跳过，只有显式开启才会访问真实站点。
    """
    run_e2e: bool = False
    run_api: bool = False
    log_level: str = "INFO"
    log_file: str = ""


def _get_env_float(key: str, default: float) -> float:
    """从环境变量获取浮点数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: str) -> str:
    """从环境变量获取字符串配置"""
    value = os.environ.get(key)
    if value:
        return value.strip()
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置（1/true/yes/on 视为真）"""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off'):
        return False
    return default


def _build_browser_config() -> BrowserConfig:
    return BrowserConfig(
        local_port=_get_env_int('FORMPROBE_BROWSER_PORT', 9333),
        headless=_get_env_bool('FORMPROBE_HEADLESS', True),
        base_url=_get_env_str('FORMPROBE_BASE_URL', "https://demoqa.com"),
    )


def _build_timeout_config() -> TimeoutConfig:
    return TimeoutConfig(
        required_wait=_get_env_float('FORMPROBE_REQUIRED_WAIT', 10.0),
        settle_duration=_get_env_float('FORMPROBE_SETTLE', 2.0),
    )


def _build_filler_config() -> FillerConfig:
    return FillerConfig(
        max_fill_attempts=max(1, _get_env_int('FORMPROBE_FILL_ATTEMPTS', 2)),
    )


def _build_api_config() -> ApiConfig:
    return ApiConfig(
        base_url=_get_env_str('FORMPROBE_API_BASE_URL', "https://reqres.in/api"),
        api_key=_get_env_str('FORMPROBE_API_KEY', ""),
        timeout=_get_env_float('FORMPROBE_API_TIMEOUT', 15.0),
    )


def _build_run_config() -> RunConfig:
    return RunConfig(
        run_e2e=_get_env_bool('FORMPROBE_E2E', False),
        run_api=_get_env_bool('FORMPROBE_API', False),
        log_level=_get_env_str('FORMPROBE_LOG_LEVEL', "INFO").upper(),
        log_file=_get_env_str('FORMPROBE_LOG_FILE', ""),
    )


# ============================================================
# 全局配置实例
# ============================================================

browser_config = _build_browser_config()
timeout_config = _build_timeout_config()
filler_config = _build_filler_config()
api_config = _build_api_config()
run_config = _build_run_config()


# ============================================================
# 便捷函数
# ============================================================

def reload_config():
    """
    重新加载配置

    从环境变量重新读取配置。
    """
    global browser_config, timeout_config, filler_config, api_config, run_config

    browser_config = _build_browser_config()
    timeout_config = _build_timeout_config()
    filler_config = _build_filler_config()
    api_config = _build_api_config()
    run_config = _build_run_config()
