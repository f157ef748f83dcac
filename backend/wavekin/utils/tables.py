"""
外部表格数据读取工具。

波浪谱表格每行为 (频率 Hz, 谱密度[, 相位])，波面时程表格每行为 (时间 s, 波面 m)。
表格可以直接内联在配置中，也可以来自空白分隔的文本文件。
"""

import logging
from typing import Optional, Sequence

import numpy as np

from wavekin.core.exceptions import WaveConfigError

logger = logging.getLogger(__name__)


def load_table(
    rows: Optional[Sequence[Sequence[float]]],
    path: Optional[str],
    name: str,
) -> np.ndarray:
    """
    读取表格数据。

    内联数据优先于文件路径。

    Args:
        rows: 内联表格行
        path: 文本文件路径
        name: 数据名称（用于错误信息）

    Returns:
        二维数组，shape: (n_rows, n_cols)

    Raises:
        WaveConfigError: 两者均未给出
    """
    if rows is not None:
        table = np.asarray(rows, dtype=float)
    elif path is not None:
        logger.info(f"Loading {name} from {path}")
        table = np.loadtxt(path, dtype=float)
    else:
        raise WaveConfigError(f"{name} must be defined")

    return np.atleast_2d(table)


def frequency_mask(freq_hz: np.ndarray, w_min: float, w_max: float) -> np.ndarray:
    """
    频率（Hz）落在 BEM 范围 [w_min, w_max]/(2π) 内的掩码。

    Args:
        freq_hz: 表格中的频率（Hz）
        w_min: BEM 最小角频率（rad/s）
        w_max: BEM 最大角频率（rad/s）
    """
    return (freq_hz >= w_min / (2.0 * np.pi)) & (freq_hz <= w_max / (2.0 * np.pi))
