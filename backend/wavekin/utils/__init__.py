"""
通用工具函数模块。
"""

from wavekin.utils.numerical import (
    directional_offset,
    linear_interpolation,
    ramp_steps,
    ramp_window,
)
from wavekin.utils.tables import frequency_mask, load_table

__all__ = [
    "ramp_steps",
    "ramp_window",
    "directional_offset",
    "linear_interpolation",
    "load_table",
    "frequency_mask",
]
