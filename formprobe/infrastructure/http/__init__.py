"""
HTTP 基础设施模块
"""

from .reqres_client import ReqResClient

__all__ = ['ReqResClient']
