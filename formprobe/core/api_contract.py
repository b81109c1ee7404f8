"""
ReqRes API 契约检查

对状态码与 JSON 结构做断言，失败抛出 ContractViolation。

约定:
- GET /users?page=N  -> 200, {data: User[], page, per_page, total, total_pages}
- GET /users/:id     -> 200, {data: User, support: {url, text}}
- POST /users        -> 200 / 201 / 401(限流，容忍), {id, name, job, createdAt}
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from formprobe.domain.exceptions import ContractViolation
from formprobe.domain.validation import validate_email

USER_FIELDS = ('id', 'email', 'first_name', 'last_name', 'avatar')
PAGE_FIELDS = ('per_page', 'total', 'total_pages')
ACCEPTED_CREATE_STATUSES = (200, 201, 401)
RATE_LIMITED = 401


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ContractViolation(message)


def check_status(status: int, expected: int = 200) -> None:
    _require(status == expected, f"expected status {expected}, got {status}")


def check_user(user: Any) -> None:
    """单个用户对象包含全部字段且邮箱格式有效"""
    _require(isinstance(user, Mapping), f"user must be an object, got {type(user).__name__}")
    for name in USER_FIELDS:
        _require(name in user, f"user is missing {name!r}: {user!r}")
    _require(validate_email(user['email']), f"user email is malformed: {user['email']!r}")


def check_users_page(body: Any, page: int) -> None:
    """分页用户列表"""
    _require(isinstance(body, Mapping), "response body must be a JSON object")
    _require('data' in body, "response is missing 'data'")
    data = body['data']
    _require(isinstance(data, list), "'data' must be an array")
    _require(len(data) > 0, "'data' must not be empty")
    _require(body.get('page') == page, f"expected page {page}, got {body.get('page')!r}")
    for name in PAGE_FIELDS:
        _require(name in body, f"response is missing {name!r}")
    for user in data:
        check_user(user)


def check_single_user(body: Any, user_id: int) -> None:
    """单个用户及 support 信息"""
    _require(isinstance(body, Mapping), "response body must be a JSON object")
    _require('data' in body, "response is missing 'data'")
    user = body['data']
    _require(isinstance(user, Mapping), "'data' must be an object")
    for name in USER_FIELDS:
        _require(name in user, f"user is missing {name!r}")
    _require(user['id'] == user_id, f"expected user id {user_id}, got {user['id']!r}")
    support = body.get('support')
    _require(isinstance(support, Mapping), "response is missing 'support'")
    _require('url' in support and 'text' in support, "'support' must carry 'url' and 'text'")


def check_create_status(status: int) -> bool:
    """
    创建用户的状态码

    Returns:
        响应是否携带新建用户（401 表示被限流，调用方应跳过后续检查）
    """
    _require(
        status in ACCEPTED_CREATE_STATUSES,
        f"expected one of {ACCEPTED_CREATE_STATUSES}, got {status}"
    )
    return status != RATE_LIMITED


def parse_timestamp(value: str) -> datetime:
    """解析 ISO-8601 时间戳（支持结尾 Z），无时区时按 UTC 处理"""
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def check_created_user(
    body: Any,
    sent: Mapping[str, str],
    now: Optional[datetime] = None,
    tolerance: float = 60.0
) -> None:
    """
    新建用户回显

    Args:
        body: 响应 JSON
        sent: 请求体 {name, job}
        now: 参考时间（默认当前 UTC 时间）
        tolerance: createdAt 与参考时间的最大差值(秒)
    """
    _require(isinstance(body, Mapping), "response body must be a JSON object")
    _require(bool(body.get('id')), "response must include a generated 'id'")
    _require(body.get('name') == sent['name'], f"name not echoed: {body.get('name')!r}")
    _require(body.get('job') == sent['job'], f"job not echoed: {body.get('job')!r}")
    created_raw = body.get('createdAt')
    _require(bool(created_raw), "response must include 'createdAt'")
    try:
        created = parse_timestamp(str(created_raw))
    except ValueError:
        raise ContractViolation(f"'createdAt' is not ISO-8601: {created_raw!r}")
    now = now or datetime.now(timezone.utc)
    drift = abs((now - created).total_seconds())
    _require(drift < tolerance, f"'createdAt' is {drift:.1f}s away from now (limit {tolerance:g}s)")


def check_json_content_type(headers: Mapping[str, str]) -> None:
    lowered = {k.lower(): v for k, v in headers.items()}
    content_type = lowered.get('content-type', '')
    _require('application/json' in content_type, f"unexpected content-type {content_type!r}")


def check_unique_ids(bodies: Iterable[Mapping[str, Any]]) -> None:
    ids = [body.get('id') for body in bodies]
    _require(len(set(ids)) == len(ids), f"created users share ids: {ids!r}")
