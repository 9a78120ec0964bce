"""
Test Scripts - 测试脚本集合

此目录包含对齐引擎及其外围接口的测试。

脚本列表:

1. test_engine.py - 对齐引擎测试
   覆盖基本对齐、分隔符后对齐、右对齐、全局模式、正则模式和边界情况。

2. test_matcher.py - 匹配器与分词测试
   测试字面/正则匹配策略、转义、零宽匹配和按行分词。

3. test_parser.py - 模式解析测试
   测试 r/ 前缀和 /g /gN /n /r /f 修饰符。

4. test_properties.py - 列宽与对齐性质测试
   验证幂等性、列宽填充和列宽计算规则。

5. test_api.py / test_cli.py - 高层 API 与命令行测试

运行所有测试:
  python -m pytest tests/ -v
"""
