"""
数值计算工具。

提供启动斜坡窗、波向投影、时间线性插值等功能。
"""

import math

import numpy as np


def ramp_steps(ramp_time: float, dt: float) -> int:
    """斜坡步数 round(ramp_time / dt)。"""
    return int(round(ramp_time / dt))


def ramp_window(num_samples: int, ramp_time: float, dt: float) -> np.ndarray:
    """
    启动斜坡窗。

    前 max_ramp 个采样点乘以半余弦窗 (1 + cos(π + π·i/max_ramp)) / 2，
    从 t=0 处的 0 单调上升到 t=ramp_time 处的 1，之后恒为 1。

    Args:
        num_samples: 时程采样点数
        ramp_time: 斜坡时长（秒），0 表示不加斜坡
        dt: 时间步长（秒）

    Returns:
        斜坡系数数组，shape: (num_samples,)
    """
    window = np.ones(num_samples)
    max_ramp = ramp_steps(ramp_time, dt)
    if ramp_time == 0 or max_ramp == 0:
        return window

    n = min(max_ramp, num_samples)
    i = np.arange(n)
    window[:n] = (1.0 + np.cos(math.pi + math.pi * i / max_ramp)) / 2.0
    return window


def directional_offset(x, y, direction_rad):
    """
    位置在入射波向上的投影 Δ = x·cos(θ) + y·sin(θ)。

    x、y 可以是标量或同形状数组。
    """
    return x * np.cos(direction_rad) + y * np.sin(direction_rad)


def linear_interpolation(
    t: np.ndarray, t_data: np.ndarray, v_data: np.ndarray
) -> np.ndarray:
    """
    时间线性插值。

    在数据点处精确复现原值；超出数据时间范围时保持端点值。

    Args:
        t: 查询时间数组
        t_data: 数据时间（递增）
        v_data: 数据值

    Returns:
        插值结果，shape 与 t 相同
    """
    return np.interp(t, t_data, v_data)
