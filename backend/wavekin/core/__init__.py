"""
核心模块：全局配置、错误类型、波浪状态存储与管理。
"""
