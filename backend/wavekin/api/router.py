"""
API 路由主文件。

统一管理所有 API 路由。
"""

from fastapi import APIRouter

from wavekin.api import query, waves

api_router = APIRouter()

# 挂载子路由
api_router.include_router(waves.router)
api_router.include_router(query.router)  # query 路由，包含谱、时程与波面场查询
