"""
基础配置 Schema 定义。

包含波浪环境、水动力输入（BEM 频率范围、水深）与运行参数等配置模型。
"""

from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator, validator

from wavekin.core.config import settings
from wavekin.schemas.data import FreqDisc, SpectrumType, WaveType

# 表格数据：每行为 (频率 Hz, 谱密度[, 相位]) 或 (时间 s, 波面 m)
Table = Tuple[Tuple[float, ...], ...]


class WaveConfig(BaseModel):
    """波浪环境描述（创建后不可修改）。"""

    model_config = ConfigDict(frozen=True)

    wave_type: WaveType = Field(..., description="波浪类型")
    T: Optional[float] = Field(
        default=None,
        gt=0,
        description="波浪周期（秒）：规则波为周期，不规则波为峰值周期，noWave 为水动力数据周期",
    )
    H: Optional[float] = Field(
        default=None,
        ge=0,
        description="波高（米）：规则波为波高，不规则波为显著波高",
    )
    spectrum_type: Optional[SpectrumType] = Field(
        default=None, description="波浪谱类型（PM / JS），仅 irregular 使用"
    )
    gamma: Optional[float] = Field(
        default=None,
        ge=1,
        le=7,
        description="JONSWAP 峰锐系数，未给出时由 T/√H 估算",
    )
    phase_seed: int = Field(
        default=0, ge=0, description="随机相位种子，0 表示不可复现"
    )
    spectrum_data: Optional[Table] = Field(
        default=None, description="导入波浪谱表格，每行 (频率 Hz, 谱密度[, 相位])"
    )
    spectrum_data_file: Optional[str] = Field(
        default=None, description="导入波浪谱文本文件路径"
    )
    eta_data: Optional[Table] = Field(
        default=None, description="导入波面时程表格，每行 (时间 s, 波面 m)"
    )
    eta_data_file: Optional[str] = Field(
        default=None, description="导入波面时程文本文件路径"
    )
    freq_range: Optional[Tuple[float, float]] = Field(
        default=None,
        description="频率范围覆盖 [min, max]（rad/s），超出 BEM 范围时忽略",
    )
    num_freq: Optional[int] = Field(
        default=None,
        ge=2,
        description="频率点数，默认 Traditional 为 1000，EqualEnergy 为 500",
    )
    freq_disc: FreqDisc = Field(
        default=FreqDisc.EQUAL_ENERGY, description="频率离散方法"
    )
    wave_dir: Tuple[float, ...] = Field(
        default=(0.0,), min_length=1, description="入射波向（度）"
    )
    wave_spread: Tuple[float, ...] = Field(
        default=(1.0,), min_length=1, description="各波向的扩散权重，无需归一化"
    )
    wave_gauge1_loc: Tuple[float, float] = Field(
        default=(0.0, 0.0), description="浪高仪 1 位置 (x, y)（米）"
    )
    wave_gauge2_loc: Tuple[float, float] = Field(
        default=(0.0, 0.0), description="浪高仪 2 位置 (x, y)（米）"
    )
    wave_gauge3_loc: Tuple[float, float] = Field(
        default=(0.0, 0.0), description="浪高仪 3 位置 (x, y)（米）"
    )

    @model_validator(mode="after")
    def validate_spread_length(self):
        """验证波向扩散权重与波向数量一致。"""
        if len(self.wave_spread) != len(self.wave_dir):
            raise ValueError("wave_spread must have the same length as wave_dir")
        return self

    @validator("freq_range")
    def validate_freq_range(cls, v):
        """验证频率范围顺序。"""
        if v is not None and v[1] <= v[0]:
            raise ValueError("freq_range max must be greater than freq_range min")
        return v

    @property
    def gauge_locations(self) -> Tuple[Tuple[float, float], ...]:
        """三个浪高仪位置。"""
        return (self.wave_gauge1_loc, self.wave_gauge2_loc, self.wave_gauge3_loc)


class HydroConfig(BaseModel):
    """水动力输入：BEM 频率范围与水深。"""

    bem_freq: Tuple[float, float] = Field(
        ..., description="BEM 频率范围 (min, max)（rad/s）"
    )
    water_depth: Union[float, Literal["infinite"]] = Field(
        default="infinite",
        description="水深（米），'infinite' 表示深水",
    )

    @validator("bem_freq")
    def validate_bem_freq(cls, v):
        """验证 BEM 频率范围合理性。"""
        if v[0] <= 0:
            raise ValueError("bem_freq min must be positive")
        if v[1] <= v[0]:
            raise ValueError("bem_freq max must be greater than bem_freq min")
        return v

    @validator("water_depth")
    def validate_water_depth(cls, v):
        """验证水深为正。"""
        if v != "infinite" and v <= 0:
            raise ValueError("water_depth must be positive or 'infinite'")
        return v

    @property
    def deep_water(self) -> bool:
        """是否按深水处理。"""
        return self.water_depth == "infinite"


class RunConfig(BaseModel):
    """运行参数配置。"""

    dt: float = Field(..., gt=0, description="时间步长（秒）")
    max_iteration_count: Optional[int] = Field(
        default=None,
        ge=0,
        description="最大迭代步数，时程共 max_iteration_count + 1 个采样点",
    )
    ramp_time: float = Field(default=0.0, ge=0, description="启动斜坡时长（秒）")
    end_time: Optional[float] = Field(
        default=None, gt=0, description="仿真结束时间（秒）"
    )
    gravity: float = Field(
        default_factory=lambda: settings.gravity,
        gt=0,
        description="重力加速度（m/s²）",
    )
    density: float = Field(
        default_factory=lambda: settings.density,
        gt=0,
        description="流体密度（kg/m³）",
    )

    @model_validator(mode="after")
    def validate_duration(self):
        """max_iteration_count 与 end_time 至少给出一个。"""
        if self.max_iteration_count is None and self.end_time is None:
            raise ValueError("either max_iteration_count or end_time must be set")
        return self

    @property
    def iteration_count(self) -> int:
        """实际迭代步数：未给出时由 end_time / dt 推出。"""
        if self.max_iteration_count is not None:
            return self.max_iteration_count
        return int(round(self.end_time / self.dt))
