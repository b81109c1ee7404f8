"""
领域异常

分类:
- InvalidChoice: 无法识别的性别/爱好取值，未做任何页面操作即失败
- ValidationFailure: 必填数据为空或格式错误，在填写之前抛出
- AssertionTimeout: 必需元素/状态在时限内未出现，用例终止
- MismatchFailure: 弹窗回显值与期望不一致
- RetryExhausted: 重填后回读值仍不一致
- ContractViolation: API 响应结构不符合约定

断言类异常同时继承 AssertionError，pytest 会将其报告为用例失败而非错误。
"""


class FormProbeError(Exception):
    """所有 formprobe 异常的基类"""


class InvalidChoice(FormProbeError, ValueError):
    """选项字段收到无法识别的取值"""

    def __init__(self, field: str, value: str, allowed):
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid {field}: {value!r} (allowed: {', '.join(self.allowed)})"
        )


class ValidationFailure(FormProbeError, ValueError):
    """必填字段数据不合法"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class AssertionTimeout(FormProbeError, AssertionError):
    """必需元素或状态在等待时限内未出现"""

    def __init__(self, target: str, condition: str, timeout: float):
        self.target = target
        self.condition = condition
        self.timeout = timeout
        super().__init__(f"{target} not {condition} within {timeout:g}s")


class MismatchFailure(FormProbeError, AssertionError):
    """确认弹窗中的值与期望值不一致"""

    def __init__(self, field: str, expected: str, actual: str):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{field} mismatch - expected: {expected!r} vs confirmation: {actual!r}"
        )


class RetryExhausted(FormProbeError, AssertionError):
    """多次填写后输入框的值仍与目标不一致"""

    def __init__(self, field: str, expected: str, actual: str, attempts: int):
        self.field = field
        self.expected = expected
        self.actual = actual
        self.attempts = attempts
        super().__init__(
            f"{field} still reads {actual!r} after {attempts} attempt(s), expected {expected!r}"
        )


class ContractViolation(FormProbeError, AssertionError):
    """API 响应不满足约定的结构或取值"""
