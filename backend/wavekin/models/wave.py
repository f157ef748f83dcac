"""
波浪运行时状态模型定义。

由 setup 流水线一次性生成，之后只读，供动力学仿真与波面场求值使用。
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from wavekin.models.elevation import WaveElevation
from wavekin.models.frequency import FrequencyGrid
from wavekin.models.spectrum import SpectrumState
from wavekin.schemas.base import WaveConfig
from wavekin.schemas.data import FreqDisc, WaveType


@dataclass(frozen=True)
class WaveRuntimeState:
    """波浪运行时状态。"""

    config: WaveConfig  # 原始波浪配置
    wave_type: WaveType  # 波浪类型
    H: float  # 实际使用的波高（米）
    T: float  # 实际使用的周期（秒）
    freq_disc: Optional[FreqDisc]  # 实际使用的频率离散方法，非谱类型为 None
    grid: FrequencyGrid  # 频率网格
    k: np.ndarray  # 波数（1/m）
    A: np.ndarray  # 振幅：规则波为 H/2，谱类型为 2S
    wave_dir: np.ndarray  # 入射波向（弧度）
    wave_spread: np.ndarray  # 波向扩散权重
    water_depth: float  # 水深（米），深水时为可视化参考水深
    deep_water: bool  # 是否深水
    gravity: float  # 重力加速度（m/s²）
    density: float  # 流体密度（kg/m³）
    phase: Optional[np.ndarray] = None  # 相位矩阵 (num_freq, num_dir)
    spectrum: Optional[SpectrumState] = None  # 波浪谱，仅谱类型
    wave_power: Optional[float] = None  # 单位波峰长度波能流（W/m）
    elevation: Optional[WaveElevation] = None  # 原点与浪高仪波面时程

    @property
    def w(self) -> np.ndarray:
        """角频率（rad/s）。"""
        return self.grid.w

    @property
    def dw(self) -> np.ndarray:
        """频率带宽（rad/s）。"""
        return self.grid.dw
