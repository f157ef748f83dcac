"""
波面时程合成服务。

生成原点与三个浪高仪位置的波面时程，采样步长 dt，共 max_iteration_count + 1 个点，
并在启动阶段乘以半余弦斜坡窗。
"""

from typing import List, Optional

import numpy as np

from wavekin.core.exceptions import WaveConfigError
from wavekin.models.elevation import ElevationSeries, WaveElevation
from wavekin.models.wave import WaveRuntimeState
from wavekin.schemas.data import WaveType
from wavekin.services.surface import surface_elevation
from wavekin.utils.numerical import linear_interpolation, ramp_window

GAUGE_NAMES = ("gauge1", "gauge2", "gauge3")


def sample_times(iteration_count: int, dt: float) -> np.ndarray:
    """时间采样点 [0, dt, ..., iteration_count·dt]。"""
    return np.arange(iteration_count + 1) * dt


def synthesize_elevation(
    state: WaveRuntimeState,
    iteration_count: int,
    dt: float,
    ramp_time: float = 0.0,
    eta_table: Optional[np.ndarray] = None,
) -> WaveElevation:
    """
    合成原点与浪高仪的波面时程。

    etaImport：原点时程由导入表格线性插值得到（加斜坡）；
    浪高仪不考虑波向，仅保留时间列，波面为零。

    Args:
        state: 波浪运行时状态
        iteration_count: 最大迭代步数
        dt: 时间步长（秒）
        ramp_time: 斜坡时长（秒）
        eta_table: 导入波面时程表格（etaImport 必需）

    Returns:
        原点与三个浪高仪的波面时程
    """
    times = sample_times(iteration_count, dt)
    window = ramp_window(len(times), ramp_time, dt)
    gauge_locations = state.config.gauge_locations

    if state.wave_type == WaveType.ETA_IMPORT:
        if eta_table is None:
            raise WaveConfigError("eta data must be defined for the 'etaImport' wave type")
        origin = linear_interpolation(times, eta_table[:, 0], eta_table[:, 1]) * window
        gauge_values: List[np.ndarray] = [np.zeros(len(times)) for _ in GAUGE_NAMES]
    else:
        origin = surface_elevation(state, times, 0.0, 0.0) * window
        gauge_values = [
            surface_elevation(state, times, gx, gy) * window
            for gx, gy in gauge_locations
        ]

    gauges = tuple(
        ElevationSeries(name=name, x=gx, y=gy, time=times, elevation=values)
        for name, (gx, gy), values in zip(GAUGE_NAMES, gauge_locations, gauge_values)
    )
    return WaveElevation(
        origin=ElevationSeries(name="origin", x=0.0, y=0.0, time=times, elevation=origin),
        gauges=gauges,
    )
