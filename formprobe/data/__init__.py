"""
测试数据模块
"""

from .test_data import (
    VALID_FORM_DATA,
    MINIMAL_FORM_DATA,
    INVALID_FORM_DATA,
    TEST_USERS,
    BOUNDARY_TEST_DATA,
    STATE_CITY_OPTIONS,
    generate_valid_form_data,
    generate_form_record,
    generate_api_user,
)

__all__ = [
    'VALID_FORM_DATA',
    'MINIMAL_FORM_DATA',
    'INVALID_FORM_DATA',
    'TEST_USERS',
    'BOUNDARY_TEST_DATA',
    'STATE_CITY_OPTIONS',
    'generate_valid_form_data',
    'generate_form_record',
    'generate_api_user',
]
