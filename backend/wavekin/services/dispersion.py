"""
色散关系求解服务。

由角频率求波数：ω² = g·k·tanh(k·d)。
"""

from typing import Optional

import numpy as np

from wavekin.core.config import settings


def wave_number(
    w: np.ndarray,
    gravity: float,
    water_depth: float,
    deep_water: bool,
    iterations: Optional[int] = None,
    tol: Optional[float] = None,
) -> np.ndarray:
    """
    计算波数。

    深水直接取 k = ω²/g；有限水深以 k₀ = ω²/g 为初值做不动点迭代
    k ← ω² / (g·tanh(k·d))，固定迭代 iterations 次（默认 100）。
    给出 tol 时，最大相对变化小于 tol 即提前退出。

    Args:
        w: 角频率（rad/s）
        gravity: 重力加速度（m/s²）
        water_depth: 水深（米）
        deep_water: 是否深水
        iterations: 迭代次数，None 时使用全局配置
        tol: 提前退出容差，None 时使用全局配置

    Returns:
        波数数组（1/m），shape 与 w 相同
    """
    w = np.asarray(w, dtype=float)
    k = w**2 / gravity
    if deep_water:
        return k

    if iterations is None:
        iterations = settings.dispersion_iterations
    if tol is None:
        tol = settings.dispersion_tolerance

    for _ in range(iterations):
        k_new = w**2 / gravity / np.tanh(k * water_depth)
        if tol is not None and np.max(np.abs(k_new - k) / k_new) < tol:
            return k_new
        k = k_new

    return k
