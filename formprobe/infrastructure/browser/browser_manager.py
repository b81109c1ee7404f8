"""
浏览器管理器 - 基础设施层实现

封装 DrissionPage 的浏览器启动、连接和标签页管理。
每个测试场景使用独立的标签页，场景结束即关闭。
"""

from typing import Any, Optional

from DrissionPage import ChromiumPage, ChromiumOptions

from formprobe import config
from formprobe.config import BrowserConfig
from formprobe.utils.logger import get_logger
from formprobe.utils.port_check import PortChecker

logger = get_logger(__name__)


class BrowserManager:
    """
    浏览器管理器

    职责:
    - 启动或连接浏览器
    - 为每个场景创建/关闭标签页
    - 退出浏览器
    """

    def __init__(self, browser_config: Optional[BrowserConfig] = None):
        """
        初始化浏览器管理器

        Args:
            browser_config: 浏览器配置（默认使用全局配置）
        """
        self.config = browser_config or config.browser_config
        self.page: Optional[ChromiumPage] = None

    def build_options(self) -> ChromiumOptions:
        """根据配置生成启动参数"""
        co = ChromiumOptions()
        co.set_local_port(self.config.local_port)
        co.headless(self.config.headless)
        co.set_argument('--no-sandbox')
        co.set_argument('--window-size', self.config.window_size)
        if self.config.browser_path:
            co.set_browser_path(self.config.browser_path)
        return co

    def start(self) -> ChromiumPage:
        """
        启动自动化浏览器

        端口上已有浏览器时直接接管，否则按配置新启动一个。

        Returns:
            ChromiumPage 对象
        """
        if self.page is not None:
            return self.page

        port = self.config.local_port
        if PortChecker.is_port_open(port):
            logger.info(f"接管已运行的浏览器 127.0.0.1:{port}")
            self.page = ChromiumPage(addr_or_opts=f'127.0.0.1:{port}')
        else:
            logger.info(f"启动浏览器 (port={port}, headless={self.config.headless})")
            self.page = ChromiumPage(addr_or_opts=self.build_options())
        return self.page

    def connect(self, addr: str) -> ChromiumPage:
        """
        连接已开启调试端口的浏览器

        Args:
            addr: 浏览器调试地址，如 127.0.0.1:9222

        Raises:
            ConnectionError: 无法连接到浏览器
        """
        host, port = addr.split(':')
        if not PortChecker.is_port_open(int(port), host):
            raise ConnectionError(f"无法连接到 {addr}。请确保浏览器已启用调试模式。")

        self.page = ChromiumPage(addr_or_opts=addr)
        return self.page

    def is_connected(self) -> bool:
        """检查是否已连接"""
        return self.page is not None

    def new_tab(self, url: Optional[str] = None) -> Any:
        """为一个场景打开独立标签页"""
        page = self.start()
        return page.new_tab(url)

    def close_tab(self, tab: Any) -> None:
        """关闭场景标签页"""
        try:
            tab.close()
        except Exception as e:
            logger.warning(f"关闭标签页失败: {e}")

    def quit(self) -> None:
        """退出浏览器"""
        if self.page is None:
            return
        try:
            self.page.quit()
        finally:
            self.page = None
