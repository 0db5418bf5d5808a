"""safe-claim 测试

运行方式：
    python -m pytest tests/ -v
"""
