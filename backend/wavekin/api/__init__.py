"""
API 路由模块。
"""

from wavekin.api.router import api_router

__all__ = ["api_router"]
