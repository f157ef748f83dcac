"""
API 请求/响应 Schema 定义。
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from wavekin.schemas.base import HydroConfig, RunConfig, WaveConfig
from wavekin.schemas.data import ElevationSeriesData, SpectrumData, WaveType


class WaveSetupRequest(BaseModel):
    """创建波浪环境请求体。"""

    wave: WaveConfig
    hydro: HydroConfig
    run: RunConfig


class WaveSetupResponse(BaseModel):
    """创建波浪环境的响应。"""

    wave_id: str = Field(..., description="波浪环境唯一 ID")
    wave_type: WaveType = Field(..., description="波浪类型")
    num_freq: int = Field(..., description="频率点数")
    wave_power: Optional[float] = Field(
        default=None, description="单位波峰长度波能流（W/m）"
    )


class SpectrumResponse(BaseModel):
    """波浪谱查询响应。"""

    wave_id: str = Field(..., description="波浪环境 ID")
    spectrum: SpectrumData = Field(..., description="离散波浪谱")


class ElevationResponse(BaseModel):
    """波面时程查询响应。"""

    wave_id: str = Field(..., description="波浪环境 ID")
    series: List[ElevationSeriesData] = Field(
        ..., description="origin 与三个浪高仪的波面时程"
    )


class FieldRequest(BaseModel):
    """波面场求值请求体。"""

    time: float = Field(..., ge=0, description="时间（秒）", examples=[10.0])
    x: Optional[List[float]] = Field(
        default=None, min_length=1, description="x 坐标（米），与 y 组成网格"
    )
    y: Optional[List[float]] = Field(
        default=None, min_length=1, description="y 坐标（米），与 x 组成网格"
    )
    domain_size: float = Field(
        default=100.0,
        gt=0,
        description="未给出 x、y 时使用的网格半宽（米）",
    )
    num_points_x: int = Field(default=50, ge=2, description="x 方向网格点数")
    num_points_y: int = Field(default=50, ge=2, description="y 方向网格点数")

    @model_validator(mode="after")
    def validate_xy(self):
        """x 与 y 须同时给出或同时省略。"""
        if (self.x is None) != (self.y is None):
            raise ValueError("x and y must be given together")
        return self


class FieldResponse(BaseModel):
    """波面场求值响应。"""

    wave_id: str = Field(..., description="波浪环境 ID")
    time: float = Field(..., description="时间（秒）")
    x: List[float] = Field(..., description="x 坐标（米）")
    y: List[float] = Field(..., description="y 坐标（米）")
    z: List[List[float]] = Field(..., description="波面高程（米），z[j][i] 对应 (x[i], y[j])")

