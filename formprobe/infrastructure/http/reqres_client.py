"""
ReqRes HTTP 客户端 - 基础设施层实现

封装 requests.Session，向 ReqRes 公共沙箱发起请求。
只负责收发，不做断言；响应校验见 formprobe.core.api_contract。
"""

from typing import Any, Dict, Optional

import requests

from formprobe import config
from formprobe.config import ApiConfig
from formprobe.utils.logger import get_logger

logger = get_logger(__name__)


class ReqResClient:
    """
    ReqRes API 客户端

    职责:
    - 管理会话、基础地址与公共请求头
    - 提供 users 相关的 GET/POST 请求
    """

    def __init__(
        self,
        api_config: Optional[ApiConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        初始化客户端

        Args:
            api_config: API 配置（默认使用全局配置）
            session: 复用的 requests 会话（测试时可注入）
        """
        self.config = api_config or config.api_config
        self.session = session or requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        })
        if self.config.api_key:
            self.session.headers['x-api-key'] = self.config.api_key

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault('timeout', self.config.timeout)
        url = self._url(path)
        response = self.session.request(method, url, **kwargs)
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def list_users(self, page: int = 1) -> requests.Response:
        """GET /users?page=N"""
        return self._request('GET', 'users', params={'page': page})

    def get_user(self, user_id: int) -> requests.Response:
        """GET /users/:id"""
        return self._request('GET', f'users/{user_id}')

    def create_user(self, name: str, job: str) -> requests.Response:
        """POST /users，请求体 {name, job}"""
        payload: Dict[str, str] = {'name': name, 'job': job}
        return self._request('POST', 'users', json=payload)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'ReqResClient':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
