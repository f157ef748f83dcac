"""
内部数据模型模块。

包含频率网格、波浪谱、波面时程与运行时状态等内部数据结构。
"""

from wavekin.models.elevation import ElevationSeries, WaveElevation
from wavekin.models.frequency import FrequencyGrid
from wavekin.models.spectrum import SpectrumState
from wavekin.models.wave import WaveRuntimeState

__all__ = [
    "FrequencyGrid",
    "SpectrumState",
    "ElevationSeries",
    "WaveElevation",
    "WaveRuntimeState",
]
