"""
频率离散服务。

根据 BEM 频率范围、用户频率范围覆盖与离散方法生成频率网格，支持：
- Traditional：等间距频率
- EqualEnergy：等间距细网格，随后由波浪谱服务重分箱为等能量频率
- Imported：使用导入波浪谱表格中的频率
"""

import logging
from typing import Optional, Tuple

import numpy as np

from wavekin.core.config import settings
from wavekin.core.exceptions import WaveConfigError
from wavekin.models.frequency import FrequencyGrid
from wavekin.schemas.data import FreqDisc
from wavekin.utils.tables import frequency_mask

logger = logging.getLogger(__name__)


def effective_range(
    bem_freq: Tuple[float, float],
    freq_range: Optional[Tuple[float, float]] = None,
) -> Tuple[float, float]:
    """
    计算有效频率范围。

    用户给出的范围只能收窄 BEM 范围：下限须位于 (w_min, w_max) 内且为正，
    上限须小于 w_max 且大于（可能已更新的）下限，否则给出警告并保留 BEM 边界。

    Args:
        bem_freq: BEM 频率范围 (min, max)（rad/s）
        freq_range: 用户频率范围覆盖（rad/s）

    Returns:
        (w_start, w_end)（rad/s）
    """
    w_start, w_end = min(bem_freq), max(bem_freq)
    if freq_range is None:
        return w_start, w_end

    lower, upper = freq_range
    if w_start < lower < w_end and lower > 0:
        w_start = lower
    else:
        logger.warning(
            "Min frequency range outside BEM data, min frequency set to min BEM frequency"
        )

    if w_start < upper < w_end:
        w_end = upper
    else:
        logger.warning(
            "Max frequency range outside BEM data, max frequency set to max BEM frequency"
        )

    return w_start, w_end


def discretize_frequency(
    freq_disc: FreqDisc,
    bem_freq: Tuple[float, float],
    freq_range: Optional[Tuple[float, float]] = None,
    num_freq: Optional[int] = None,
    spectrum_table: Optional[np.ndarray] = None,
) -> Tuple[FrequencyGrid, int]:
    """
    生成频率网格。

    Args:
        freq_disc: 频率离散方法
        bem_freq: BEM 频率范围 (min, max)（rad/s）
        freq_range: 用户频率范围覆盖（rad/s）
        num_freq: 频率点数，None 时使用默认值
        spectrum_table: 导入波浪谱表格（Imported 必需）

    Returns:
        (频率网格, 目标频率点数)。EqualEnergy 返回的是细网格，目标点数为重分箱后的点数。
    """
    if freq_disc == FreqDisc.TRADITIONAL:
        w_start, w_end = effective_range(bem_freq, freq_range)
        n = num_freq if num_freq is not None else settings.traditional_num_freq
        w = np.linspace(w_start, w_end, n)
        dw = np.full(n, (w_end - w_start) / (n - 1))
        return FrequencyGrid(w=w, dw=dw), n

    if freq_disc == FreqDisc.EQUAL_ENERGY:
        w_start, w_end = effective_range(bem_freq, freq_range)
        intervals = settings.equal_energy_fine_intervals
        n = num_freq if num_freq is not None else settings.equal_energy_num_freq
        # 每个等能量分箱至少需要一个细网格区间
        if n >= intervals:
            raise WaveConfigError(
                f"num_freq={n} must be smaller than the EqualEnergy fine grid "
                f"size ({intervals} intervals)"
            )
        w = np.linspace(w_start, w_end, intervals + 1)
        dw = np.full(len(w), (w_end - w_start) / intervals)
        return FrequencyGrid(w=w, dw=dw), n

    if freq_disc == FreqDisc.IMPORTED:
        grid = imported_frequency_grid(spectrum_table, bem_freq)
        return grid, grid.num_freq

    raise WaveConfigError(f"Unknown frequency discretization: {freq_disc}")


def imported_frequency_grid(
    spectrum_table: Optional[np.ndarray], bem_freq: Tuple[float, float]
) -> FrequencyGrid:
    """
    由导入波浪谱表格生成频率网格。

    仅保留 BEM 范围内的频率；带宽内部采用中心差分，两端采用单侧差分。
    """
    if spectrum_table is None:
        raise WaveConfigError(
            "spectrum data must be defined for 'Imported' frequency discretization"
        )

    freq_data = spectrum_table[:, 0]
    mask = frequency_mask(freq_data, min(bem_freq), max(bem_freq))
    w = freq_data[mask] * 2.0 * np.pi
    if len(w) < 2:
        raise WaveConfigError(
            "spectrum data must contain at least two frequencies inside the BEM range"
        )

    # np.gradient 在单位间距下：内部 (w[i+1]-w[i-1])/2，两端单侧差分
    dw = np.gradient(w)
    return FrequencyGrid(w=w, dw=dw)
