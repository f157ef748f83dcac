"""
自由液面波面计算核心。

各波浪类型的波面公式，按波浪类型查表分派。时程合成与波面场求值共用这些公式：
- 时程：t 为时间数组，(x, y) 为单点
- 波面场：t 为单个时刻，(x, y) 为网格数组
"""

from typing import Callable, Dict

import numpy as np

from wavekin.models.wave import WaveRuntimeState
from wavekin.schemas.data import WaveType
from wavekin.utils.numerical import directional_offset

SurfaceHandler = Callable[[WaveRuntimeState, object, object, object], np.ndarray]


def _zero_surface(state: WaveRuntimeState, t, x, y) -> np.ndarray:
    """无可见波面。"""
    return np.zeros(np.broadcast(t, x, y).shape)


def _regular_surface(state: WaveRuntimeState, t, x, y) -> np.ndarray:
    """
    规则波：η = A·cos(ω·t - k·Δ)。

    规则波只使用第一个入射波向。
    """
    delta = directional_offset(x, y, state.wave_dir[0])
    eta = state.A[0] * np.cos(state.w[0] * t - state.k[0] * delta)
    return np.broadcast_to(eta, np.broadcast(t, x, y).shape).astype(float)


def _irregular_surface(state: WaveRuntimeState, t, x, y) -> np.ndarray:
    """
    不规则波：η = Σ_dir Σ_freq √(A·dw·spread)·cos(ω·t - k·Δ_dir + φ)。

    相位矩阵只有一列（导入相位）时，所有波向共用该列。
    """
    eta = np.zeros(np.broadcast(t, x, y).shape)
    n_phase_cols = state.phase.shape[1]

    for idir, direction in enumerate(state.wave_dir):
        delta = directional_offset(x, y, direction)
        amplitude = np.sqrt(state.A * state.dw * state.wave_spread[idir])
        phase = state.phase[:, min(idir, n_phase_cols - 1)]

        # 逐个频率成分叠加
        for j in range(len(state.w)):
            eta += amplitude[j] * np.cos(
                state.w[j] * t - state.k[j] * delta + phase[j]
            )

    return eta


# 每个波浪类型对应一个波面公式；etaImport 没有方向信息，波面场为零
SURFACE_HANDLERS: Dict[WaveType, SurfaceHandler] = {
    WaveType.NO_WAVE: _zero_surface,
    WaveType.NO_WAVE_CIC: _zero_surface,
    WaveType.REGULAR: _regular_surface,
    WaveType.REGULAR_CIC: _regular_surface,
    WaveType.IRREGULAR: _irregular_surface,
    WaveType.SPECTRUM_IMPORT: _irregular_surface,
    WaveType.ETA_IMPORT: _zero_surface,
}


def surface_elevation(state: WaveRuntimeState, t, x, y) -> np.ndarray:
    """
    计算未加斜坡的波面高程。

    Args:
        state: 波浪运行时状态
        t: 时间（秒），标量或数组
        x: x 坐标（米），标量或数组
        y: y 坐标（米），标量或数组

    Returns:
        波面高程，shape 为 t、x、y 广播后的形状
    """
    return SURFACE_HANDLERS[state.wave_type](state, t, x, y)
