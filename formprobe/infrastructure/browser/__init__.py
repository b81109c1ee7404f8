"""
浏览器基础设施模块
"""

from .browser_manager import BrowserManager

__all__ = ['BrowserManager']
