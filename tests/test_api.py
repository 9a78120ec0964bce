#!/usr/bin/env python3
"""
高层 API 测试
"""

import logging

from easy_align import align_with_modifiers, run_with_modifiers, validate_pattern


def test_modifiers_plain(assignments):
    """测试不带修饰符的输入"""
    assert align_with_modifiers(assignments, "=") == "a   = 1\nab  = 2\nabc = 3"


def test_modifiers_after(assignments):
    """测试 /n 修饰符"""
    assert align_with_modifiers(assignments, "=/n") == "a =   1\nab =  2\nabc = 3"


def test_modifiers_right(assignments):
    """测试 /r 修饰符"""
    assert align_with_modifiers(assignments, "=/r") == "  a = 1\n ab = 2\nabc = 3"


def test_modifiers_global_count():
    """测试 /g1 修饰符"""
    text = "a = 1 = x\nab = 22 = y"
    assert align_with_modifiers(text, "=/g1") == "a  = 1 = x\nab = 22 = y"
    assert align_with_modifiers(text, "=/g") == "a  = 1  = x\nab = 22 = y"


def test_modifiers_regex():
    """测试 r/ 前缀"""
    text = "a  =  1\nab   =   2\nabc    =    3"
    expected = "a    =  1\nab    =   2\nabc    =    3"
    assert align_with_modifiers(text, r"r/\s+=") == expected


def test_modifiers_force():
    """测试 /f 修饰符"""
    text = "a = 1\nno delimiter\nbc = 2"
    expected = "a           = 1\nno delimiter\nbc          = 2"
    assert align_with_modifiers(text, "=/f") == expected


def test_modifiers_empty_reverts(assignments):
    """测试空模式返回原文"""
    for raw in ("", "r/", "/g"):
        assert align_with_modifiers(assignments, raw) == assignments


def test_modifiers_invalid_regex(assignments, caplog):
    """测试无效正则返回原文并记录警告"""
    with caplog.at_level(logging.WARNING, logger="easy_align"):
        result = run_with_modifiers(assignments, "r/(=")

    assert result.text == assignments
    assert not result.success
    assert "Invalid regex pattern" in caplog.text


def test_validate_pattern():
    """测试模式校验"""
    assert validate_pattern("=") is None
    assert validate_pattern(r"\s+=", is_regex=True) is None
    assert validate_pattern("[invalid") is None

    message = validate_pattern("[invalid", is_regex=True)
    assert message.startswith("Invalid regex pattern")
