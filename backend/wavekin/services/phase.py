"""
波浪相位服务。

为每个 (频率, 波向) 组合分配相位。随机源显式构造并注入，不使用全局随机状态。
"""

from typing import Optional, Tuple

import numpy as np

from wavekin.schemas.data import FreqDisc
from wavekin.utils.tables import frequency_mask


def phase_rng(phase_seed: int) -> np.random.Generator:
    """
    构造相位随机源。

    phase_seed 非 0 时以其为种子（可复现），为 0 时从系统熵初始化（不可复现）。
    """
    return np.random.default_rng(phase_seed if phase_seed != 0 else None)


def generate_phases(
    num_freq: int,
    num_dir: int,
    freq_disc: FreqDisc,
    rng: np.random.Generator,
    spectrum_table: Optional[np.ndarray] = None,
    bem_freq: Optional[Tuple[float, float]] = None,
) -> np.ndarray:
    """
    生成相位矩阵。

    Traditional / EqualEnergy：每个 (波向, 频率) 独立抽取 [0, 2π) 均匀相位。
    Imported：表格有第三列时直接读取相位，否则抽取单个波向的随机相位。

    Args:
        num_freq: 频率点数
        num_dir: 波向数
        freq_disc: 频率离散方法
        rng: 随机源
        spectrum_table: 导入波浪谱表格
        bem_freq: BEM 频率范围（rad/s）

    Returns:
        相位矩阵，shape: (num_freq, num_dir)；Imported 时 shape: (num_freq, 1)
    """
    if freq_disc in (FreqDisc.TRADITIONAL, FreqDisc.EQUAL_ENERGY):
        return (2.0 * np.pi * rng.random((num_dir, num_freq))).T

    if spectrum_table is not None and spectrum_table.shape[1] == 3:
        mask = frequency_mask(spectrum_table[:, 0], min(bem_freq), max(bem_freq))
        return spectrum_table[mask, 2][np.newaxis, :].T

    return (2.0 * np.pi * rng.random((1, num_freq))).T
