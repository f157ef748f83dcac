"""
数据 Schema 定义。

包含波浪类型、波浪谱类型、频率离散方法等枚举，以及对外输出的时程/谱数据模型。
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class WaveType(str, Enum):
    """波浪类型枚举。"""

    NO_WAVE = "noWave"
    NO_WAVE_CIC = "noWaveCIC"
    REGULAR = "regular"
    REGULAR_CIC = "regularCIC"
    IRREGULAR = "irregular"
    SPECTRUM_IMPORT = "spectrumImport"
    ETA_IMPORT = "etaImport"


class SpectrumType(str, Enum):
    """波浪谱类型枚举。"""

    PM = "PM"
    JS = "JS"
    IMPORTED = "Imported"
    BS = "BS"  # Bretschneider，已不再支持


class FreqDisc(str, Enum):
    """频率离散方法枚举。"""

    TRADITIONAL = "Traditional"
    EQUAL_ENERGY = "EqualEnergy"
    IMPORTED = "Imported"


# 不产生可见波面的波浪类型
NO_WAVE_TYPES = (WaveType.NO_WAVE, WaveType.NO_WAVE_CIC)
# 规则波类型
REGULAR_TYPES = (WaveType.REGULAR, WaveType.REGULAR_CIC)
# 基于波浪谱的波浪类型
SPECTRAL_TYPES = (WaveType.IRREGULAR, WaveType.SPECTRUM_IMPORT)


class ElevationSeriesData(BaseModel):
    """某一位置的波面时程。"""

    name: str = Field(..., description="位置名称：origin / gauge1 / gauge2 / gauge3")
    x: float = Field(..., description="位置 x 坐标（米）")
    y: float = Field(..., description="位置 y 坐标（米）")
    time: List[float] = Field(..., description="时间序列（秒）")
    elevation: List[float] = Field(..., description="波面高程（米）")


class SpectrumData(BaseModel):
    """离散后的波浪谱及其统计量。"""

    w: List[float] = Field(..., description="角频率（rad/s）")
    dw: List[float] = Field(..., description="频率带宽（rad/s）")
    k: List[float] = Field(..., description="波数（1/m）")
    S: Optional[List[float]] = Field(
        default=None, description="谱密度（m²·s/rad），非谱类型波浪为空"
    )
    A: Optional[List[float]] = Field(
        default=None, description="成分振幅系数 A = 2S"
    )
    Hm0: Optional[float] = Field(default=None, description="谱显著波高 4√m0（米）")
    Tp: Optional[float] = Field(default=None, description="谱峰周期（秒）")
    gamma: Optional[float] = Field(
        default=None, description="实际使用的 JONSWAP 峰锐系数"
    )
