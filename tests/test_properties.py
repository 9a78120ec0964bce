#!/usr/bin/env python3
"""
列宽与对齐性质测试
"""

import pytest

from easy_align import align
from easy_align.core import ColumnWidthResolver, LineTokenizer, LiteralMatcher
from easy_align.models import AlignConfig


SAMPLES = [
    "a = 1\nab = 2\nabc = 3",
    "a = 1 = x\nab = 22 = y\nabc = 3 = zz",
    "x := 10\nlonger_name := 2\n\nno delimiter here\n= leading",
    '"name": "John",\n"age": 30,\n"city": "NYC"',
]

# Padding before the delimiter (or before the text) is measured on the next run
STABLE_CONFIGS = [
    {},
    {"align_right": True},
    {"align_right": True, "align_after": True},
    {"is_global": True},
    {"is_global": True, "global_count": 1},
    {"force": True},
    {"is_global": True, "align_right": True, "force": True},
]


def _tokenize(text, pattern, config):
    return LineTokenizer(LiteralMatcher(pattern), config).tokenize(text)


@pytest.mark.parametrize("options", STABLE_CONFIGS)
@pytest.mark.parametrize("text", SAMPLES)
def test_idempotent(text, options):
    """测试重复对齐结果不变"""
    for pattern in ("=", ":"):
        once = align(text, pattern, **options)
        assert align(once, pattern, **options) == once


@pytest.mark.parametrize("options", STABLE_CONFIGS)
@pytest.mark.parametrize("text", SAMPLES)
def test_columns_filled_exactly(text, options):
    """测试每个参与对齐的分段都恰好填满列宽"""
    config = AlignConfig(**options)
    widths = ColumnWidthResolver(config).resolve(_tokenize(text, "=", config))
    aligned = _tokenize(align(text, "=", **options), "=", config)

    for line in aligned:
        if not line.is_matched:
            continue
        for i, segment, delimiter in line.pairs():
            if delimiter is None or i >= (config.cutoff() or len(line.segments)):
                break
            rendered = len(segment) + (len(delimiter) if config.align_after else 0)
            assert rendered == widths[i // 2]


@pytest.mark.parametrize("text", SAMPLES)
def test_align_after_text_starts_at_column_width(text):
    """测试分隔符后对齐时后续文本从同一列开始"""
    config = AlignConfig(align_after=True)
    lines = _tokenize(text, "=", config)
    widths = ColumnWidthResolver(config).resolve(lines)

    for line, result in zip(lines, align(text, "=", align_after=True).split("\n")):
        if not line.is_matched:
            assert result == line.segments[0]
            continue
        assert result.startswith(line.segments[0] + line.segments[1])
        assert result[widths[0] :] == line.segments[2]


def test_resolver_ignores_unmatched_lines():
    """测试未匹配行不影响列宽"""
    config = AlignConfig()
    lines = _tokenize("a = 1\nvery long line without delimiter\nab = 2", "=", config)

    assert ColumnWidthResolver(config).resolve(lines) == {0: 3, 1: 2}


def test_resolver_forced_lines_contribute():
    """测试强制模式下未匹配行参与首列宽度"""
    config = AlignConfig(force=True)
    lines = _tokenize("a = 1\nvery long\nab = 2", "=", config)

    assert ColumnWidthResolver(config).resolve(lines) == {0: 9, 1: 2}


def test_resolver_align_after_includes_delimiter():
    """测试分隔符后对齐时列宽包含分隔符"""
    config = AlignConfig(align_after=True)
    lines = _tokenize("a := 1\nabc := 2", ":=", config)

    assert ColumnWidthResolver(config).resolve(lines) == {0: 6, 1: 2}


def test_resolver_bounded_count():
    """测试数量限制之后的列不计算宽度"""
    config = AlignConfig(is_global=True, global_count=1)
    lines = _tokenize("a = 1 = x\nab = 22 = y", "=", config)

    assert ColumnWidthResolver(config).resolve(lines) == {0: 3}


def test_resolver_empty_input():
    """测试没有参与对齐的行"""
    config = AlignConfig()
    lines = _tokenize("no\nmatch", "=", config)

    assert ColumnWidthResolver(config).resolve(lines) == {}
