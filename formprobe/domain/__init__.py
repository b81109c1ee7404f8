"""
领域层

实体、异常、前置校验与接口定义。
"""
