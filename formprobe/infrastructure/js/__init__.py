"""
JavaScript 基础设施模块

提供 JavaScript 脚本的集中存储和管理。
"""

from .script_store import ScriptStore

__all__ = ['ScriptStore']
