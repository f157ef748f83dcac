"""
自由液面波面场求值服务。

在任意 (x, y) 网格上计算给定时刻的波面高程，供外部可视化按时间步采样。
"""

import numpy as np

from wavekin.models.wave import WaveRuntimeState
from wavekin.services.surface import surface_elevation


def evaluate_field(
    state: WaveRuntimeState, t: float, X: np.ndarray, Y: np.ndarray
) -> np.ndarray:
    """
    计算 t 时刻网格上的波面高程。

    纯函数，不修改状态，可按任意时间顺序重复调用。不施加启动斜坡。

    Args:
        state: 波浪运行时状态
        t: 时间（秒）
        X: 网格 x 坐标（米）
        Y: 网格 y 坐标（米），shape 与 X 相同

    Returns:
        波面高程 Z，shape 与 X 相同
    """
    X = np.asarray(X, dtype=float)
    Y = np.asarray(Y, dtype=float)
    if X.shape != Y.shape:
        raise ValueError("X and Y must have the same shape")

    return surface_elevation(state, float(t), X, Y)


def field_grid(domain_size: float, num_points_x: int = 50, num_points_y: int = 50):
    """
    生成 [-domain_size, domain_size]² 上的规则网格。

    Returns:
        (X, Y) 网格坐标，shape: (num_points_y, num_points_x)
    """
    x = np.linspace(-domain_size, domain_size, num_points_x)
    y = np.linspace(-domain_size, domain_size, num_points_y)
    return np.meshgrid(x, y)
