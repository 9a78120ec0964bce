"""Pytest 配置和 fixtures

定义所有测试共享的 fixtures 和配置。
"""

import pytest


@pytest.fixture
def assignments():
    """三行赋值语句"""
    return "a = 1\nab = 2\nabc = 3"


@pytest.fixture
def chained_assignments():
    """每行包含两个分隔符"""
    return "a = 1 = x\nab = 2 = y\nabc = 3 = z"


@pytest.fixture
def input_file(tmp_path, assignments):
    """写入临时输入文件"""
    path = tmp_path / "input.txt"
    path.write_text(assignments, encoding="utf-8")
    return path
