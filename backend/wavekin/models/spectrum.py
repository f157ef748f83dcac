"""
波浪谱状态模型定义。
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from wavekin.models.frequency import FrequencyGrid


@dataclass(frozen=True)
class SpectrumState:
    """离散后的波浪谱，与频率网格逐点对齐。"""

    grid: FrequencyGrid  # 最终频率网格（EqualEnergy 为重分箱后的网格）
    S: np.ndarray  # 谱密度（m²·s/rad）
    A: np.ndarray  # 成分振幅系数 A = 2S
    wave_power: float  # 单位波峰长度波能流（W/m）
    gamma: Optional[float] = None  # JONSWAP 实际使用的峰锐系数
    bin_boundaries: Optional[np.ndarray] = None  # EqualEnergy 细网格分箱边界索引
    bin_energy: Optional[np.ndarray] = None  # EqualEnergy 每个分箱的能量（m²）
