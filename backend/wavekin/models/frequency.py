"""
频率网格与波数模型定义。
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class FrequencyGrid:
    """离散频率网格。"""

    w: np.ndarray  # 角频率（rad/s），严格递增
    dw: np.ndarray  # 每个频率点的带宽（rad/s），严格为正

    def __post_init__(self):
        if len(self.w) != len(self.dw):
            raise ValueError("w and dw must have the same length")

    @property
    def num_freq(self) -> int:
        """频率点数。"""
        return len(self.w)

    @property
    def freq_hz(self) -> np.ndarray:
        """频率（Hz）。"""
        return self.w / (2.0 * np.pi)
