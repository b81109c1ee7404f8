# Application Services

"""
应用服务层

封装业务逻辑，协调领域对象和基础设施。
"""

from .submission_service import FormSubmissionService

__all__ = [
    'FormSubmissionService',
]
