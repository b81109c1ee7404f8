"""
浏览器标签页接口

定义页面对象所依赖的 DrissionPage 标签页/元素能力的抽象契约。
"""

from typing import Protocol, List, Any, Optional


class IElementStates(Protocol):
    """元素状态"""

    @property
    def is_displayed(self) -> bool:
        ...

    @property
    def is_enabled(self) -> bool:
        ...


class IElement(Protocol):
    """
    页面元素接口

    对应 DrissionPage 的 ChromiumElement；未找到元素时返回的
    NoneElement 为假值。
    """

    states: IElementStates

    @property
    def value(self) -> Optional[str]:
        """输入框当前值"""
        ...

    @property
    def text(self) -> str:
        """元素文本"""
        ...

    def attr(self, name: str) -> Optional[str]:
        """读取属性"""
        ...

    def input(self, vals: Any, clear: bool = False) -> Any:
        """输入文本 / 按键 / 上传文件路径"""
        ...

    def clear(self) -> Any:
        """清空输入框"""
        ...

    def click(self, by_js: Optional[bool] = False, timeout: float = 1.5) -> Any:
        """点击；by_js=True 时绕过遮挡检查直接派发"""
        ...

    def ele(self, locator: str, timeout: Optional[float] = None) -> 'IElement':
        """在元素内查找子元素"""
        ...

    def eles(self, locator: str, timeout: Optional[float] = None) -> List['IElement']:
        """在元素内查找多个子元素"""
        ...


class IBrowserTab(Protocol):
    """
    浏览器标签页接口

    职责:
    - 提供页面导航、元素查找、脚本执行、等待等能力
    - 隔离具体浏览器实现（DrissionPage 的 ChromiumPage / ChromiumTab）
    """

    @property
    def title(self) -> str:
        """页面标题"""
        ...

    wait: Any       # 可调用 wait(seconds)，并提供 ele_displayed / ele_hidden
    actions: Any    # 键盘动作链：key_down(key).key_up(key)

    def get(self, url: str) -> Any:
        """导航到指定地址"""
        ...

    def ele(self, locator: str, timeout: Optional[float] = None) -> IElement:
        """查找元素"""
        ...

    def eles(self, locator: str, timeout: Optional[float] = None) -> List[IElement]:
        """查找多个元素"""
        ...

    def run_js(self, script: str, *args: Any) -> Any:
        """执行 JavaScript"""
        ...

    def refresh(self) -> Any:
        """刷新页面"""
        ...
