"""
波面时程模型定义。
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class ElevationSeries:
    """某一位置的波面时程。"""

    name: str  # 位置名称
    x: float  # x 坐标（米）
    y: float  # y 坐标（米）
    time: np.ndarray  # 时间（秒），从 0 开始等步长
    elevation: np.ndarray  # 波面高程（米）

    @property
    def dt(self) -> float:
        """时间步长（秒）。"""
        return float(self.time[1] - self.time[0]) if len(self.time) > 1 else 0.0


@dataclass(frozen=True)
class WaveElevation:
    """原点与三个浪高仪的波面时程。"""

    origin: ElevationSeries
    gauges: Tuple[ElevationSeries, ElevationSeries, ElevationSeries]

    def all_series(self) -> Tuple[ElevationSeries, ...]:
        """按 origin, gauge1, gauge2, gauge3 顺序返回全部时程。"""
        return (self.origin,) + tuple(self.gauges)
