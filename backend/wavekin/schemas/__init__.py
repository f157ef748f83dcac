"""
Pydantic Schema 模块。

包含请求/响应模型、配置模型、数据模型等。
"""

from wavekin.schemas.api import (
    ElevationResponse,
    FieldRequest,
    FieldResponse,
    SpectrumResponse,
    WaveSetupRequest,
    WaveSetupResponse,
)
from wavekin.schemas.base import HydroConfig, RunConfig, WaveConfig
from wavekin.schemas.data import (
    ElevationSeriesData,
    FreqDisc,
    SpectrumData,
    SpectrumType,
    WaveType,
)

__all__ = [
    # 基础配置
    "WaveConfig",
    "HydroConfig",
    "RunConfig",
    # 数据模型
    "WaveType",
    "SpectrumType",
    "FreqDisc",
    "ElevationSeriesData",
    "SpectrumData",
    # API 请求/响应
    "WaveSetupRequest",
    "WaveSetupResponse",
    "SpectrumResponse",
    "ElevationResponse",
    "FieldRequest",
    "FieldResponse",
]
