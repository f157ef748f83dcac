"""
波浪谱模型服务。

在频率网格上计算波浪谱密度与单位波峰长度波能流，支持：
- Pierson-Moskowitz (PM) 光谱（IEC TS 62600-2 Annex C.2）
- JONSWAP (JS) 光谱（IEC TS 62600-2 Annex C.2）
- 导入波浪谱表格
并在 EqualEnergy 离散下将细网格重分箱为等能量频率。
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np
from scipy.integrate import cumulative_trapezoid, trapezoid

from wavekin.core.exceptions import UnsupportedSpectrumError, WaveConfigError
from wavekin.models.frequency import FrequencyGrid
from wavekin.models.spectrum import SpectrumState
from wavekin.schemas.data import FreqDisc, SpectrumType
from wavekin.utils.tables import frequency_mask

logger = logging.getLogger(__name__)

# JONSWAP 谱峰宽度参数
JS_SIGMA_LOW = 0.07  # f <= fp
JS_SIGMA_HIGH = 0.09  # f > fp


def pm_spectrum(freq: np.ndarray, T: float, H: float) -> np.ndarray:
    """
    Pierson-Moskowitz 光谱（频率单位 Hz）。

    S(f) = A·f⁻⁵·exp(-B·f⁻⁴)，其中 B = 1.25/T⁴，A = B·(H/2)²

    Args:
        freq: 频率（Hz）
        T: 峰值周期（秒）
        H: 显著波高（米）

    Returns:
        谱密度（m²·s）
    """
    B = (5.0 / 4.0) * (1.0 / T) ** 4
    A = B * (H / 2.0) ** 2
    return A * freq ** (-5) * np.exp(-B * freq ** (-4))


def estimate_gamma(T: float, H: float) -> float:
    """由 T/√H 估算 JONSWAP 峰锐系数。"""
    ratio = T / math.sqrt(H)
    if ratio <= 3.6:
        return 5.0
    if ratio > 5:
        return 1.0
    return math.exp(5.75 - 1.15 * ratio)


def jonswap_spectrum(
    freq: np.ndarray, T: float, H: float, gamma: Optional[float] = None
) -> Tuple[np.ndarray, float]:
    """
    JONSWAP 光谱（频率单位 Hz）。

    在 PM 光谱基础上乘以峰值增强因子 γ^exp(-(f-fp)²/(2σ²fp²))
    与归一化常数 C = 1 - 0.287·ln(γ)。

    Returns:
        (谱密度（m²·s）, 实际使用的 γ)
    """
    if gamma is None:
        gamma = estimate_gamma(T, H)

    fp = 1.0 / T
    sigma = np.where(freq <= fp, JS_SIGMA_LOW, JS_SIGMA_HIGH)
    peak_enhancement = gamma ** np.exp(-((freq - fp) ** 2) / (2.0 * sigma**2 * fp**2))
    C = 1.0 - 0.287 * math.log(gamma)
    if C <= 0:
        raise WaveConfigError(
            f"JONSWAP gamma={gamma:g} gives a non-positive normalization constant"
        )
    return C * pm_spectrum(freq, T, H) * peak_enhancement, gamma


def imported_spectrum(
    spectrum_table: Optional[np.ndarray], bem_freq: Tuple[float, float]
) -> np.ndarray:
    """导入波浪谱表格中 BEM 范围内的谱密度（m²·s）。"""
    if spectrum_table is None:
        raise WaveConfigError("spectrum data must be defined for an imported spectrum")

    mask = frequency_mask(spectrum_table[:, 0], min(bem_freq), max(bem_freq))
    logger.info(
        '"spectrumImport" uses the number of imported wave frequencies '
        '(not "Traditional" or "EqualEnergy")'
    )
    return spectrum_table[mask, 1]


def spectral_density(
    spectrum_type: SpectrumType,
    freq: np.ndarray,
    T: float,
    H: float,
    gamma: Optional[float] = None,
    spectrum_table: Optional[np.ndarray] = None,
    bem_freq: Optional[Tuple[float, float]] = None,
) -> Tuple[np.ndarray, Optional[float]]:
    """
    按波浪谱类型计算谱密度（频率单位 Hz）。

    Returns:
        (谱密度（m²·s）, JONSWAP 实际使用的 γ，其他类型为 None)
    """
    if spectrum_type == SpectrumType.PM:
        return pm_spectrum(freq, T, H), None
    elif spectrum_type == SpectrumType.JS:
        return jonswap_spectrum(freq, T, H, gamma)
    elif spectrum_type == SpectrumType.IMPORTED:
        return imported_spectrum(spectrum_table, bem_freq), None
    elif spectrum_type == SpectrumType.BS:
        raise UnsupportedSpectrumError(
            'Bretschneider Spectrum ("BS" option) is no longer supported'
        )
    else:
        raise WaveConfigError(f"Unknown spectrum type: {spectrum_type}")


def _group_velocity_factor(kd: np.ndarray) -> np.ndarray:
    """有限水深群速度修正 1 + 2kd/sinh(2kd)。"""
    with np.errstate(over="ignore"):
        return 1.0 + 2.0 * kd / np.sinh(2.0 * kd)


def wave_power_irregular(
    S: np.ndarray,
    w: np.ndarray,
    dw: np.ndarray,
    k: np.ndarray,
    gravity: float,
    density: float,
    water_depth: float,
    deep_water: bool,
) -> float:
    """
    不规则波单位波峰长度波能流（W/m）。

    深水：Pw = ½ρg²·Σ(S·dw/ω)
    有限水深：Pw = ½ρg·Σ(S·dw·√(g/k·tanh(kd))·(1 + 2kd/sinh(2kd)))
    """
    if deep_water:
        return float(np.sum(0.5 * density * gravity**2 * S * dw / w))

    kd = k * water_depth
    celerity = np.sqrt(gravity / k * np.tanh(kd))
    return float(
        np.sum(0.5 * density * gravity * S * dw * celerity * _group_velocity_factor(kd))
    )


def wave_power_regular(
    A: float,
    T: float,
    k: float,
    gravity: float,
    density: float,
    water_depth: float,
    deep_water: bool,
) -> float:
    """
    规则波单位波峰长度波能流（W/m）。

    深水：Pw = ρg²A²T/(8π)
    有限水深：Pw = ¼ρgA²·√(g/k·tanh(kd))·(1 + 2kd/sinh(2kd))
    """
    if deep_water:
        return density * gravity**2 * A**2 * T / (8.0 * math.pi)

    kd = np.asarray(k * water_depth, dtype=float)
    celerity = np.sqrt(gravity / k * np.tanh(kd))
    return float(
        density * gravity * A**2 / 4.0 * celerity * _group_velocity_factor(kd)
    )


def equal_energy_rebin(
    freq: np.ndarray, S_f: np.ndarray, num_freq: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    等能量分箱。

    将细网格上的累积能量 SF 分成 num_freq + 1 个能量近似相等的分箱：
    对第 kk 个分箱，从上一个边界向后查找 SF 首次达到 kk·a_targ 的采样点，
    再取该点与前一点中更接近目标的一个作为边界。

    Args:
        freq: 细网格频率（Hz）
        S_f: 细网格谱密度（m²·s）
        num_freq: 重分箱后的频率点数

    Returns:
        (分箱边界索引，shape: (num_freq + 2,), 每个分箱的能量，shape: (num_freq + 1,))
    """
    num_bins = num_freq + 1
    m0 = trapezoid(np.abs(S_f), freq)
    a_targ = m0 / num_bins
    SF = cumulative_trapezoid(S_f, freq, initial=0.0)
    last = len(SF) - 1

    boundaries = np.zeros(num_bins + 1, dtype=int)
    bin_energy = np.zeros(num_bins)
    for kk in range(1, num_bins + 1):
        start = boundaries[kk - 1]
        target = kk * a_targ
        idx = start + 1 + int(np.searchsorted(SF[start + 1:], target))
        idx = min(idx, last)
        if idx - 1 > start and abs(SF[idx - 1] - target) < abs(SF[idx] - target):
            idx -= 1
        boundaries[kk] = idx
        bin_energy[kk - 1] = trapezoid(
            np.abs(S_f[start:idx + 1]), freq[start:idx + 1]
        )

    return boundaries, bin_energy


def generate_spectrum(
    grid: FrequencyGrid,
    num_freq: int,
    freq_disc: FreqDisc,
    spectrum_type: SpectrumType,
    T: float,
    H: float,
    k: np.ndarray,
    gravity: float,
    density: float,
    water_depth: float,
    deep_water: bool,
    gamma: Optional[float] = None,
    spectrum_table: Optional[np.ndarray] = None,
    bem_freq: Optional[Tuple[float, float]] = None,
) -> SpectrumState:
    """
    生成离散波浪谱。

    波能流在重分箱之前的网格上计算（k 为该网格上的波数）；
    EqualEnergy 离散随后重分箱为 num_freq 个等能量频率点。

    Args:
        grid: 频率网格（EqualEnergy 为细网格）
        num_freq: 目标频率点数
        freq_disc: 频率离散方法
        spectrum_type: 波浪谱类型
        T: 峰值周期（秒）
        H: 显著波高（米）
        k: grid 上的波数（1/m）
        gravity: 重力加速度（m/s²）
        density: 流体密度（kg/m³）
        water_depth: 水深（米）
        deep_water: 是否深水
        gamma: JONSWAP 峰锐系数
        spectrum_table: 导入波浪谱表格
        bem_freq: BEM 频率范围（rad/s）

    Returns:
        波浪谱状态
    """
    freq = grid.freq_hz
    S_f, gamma_used = spectral_density(
        spectrum_type, freq, T, H, gamma, spectrum_table, bem_freq
    )
    if len(S_f) != grid.num_freq:
        raise WaveConfigError(
            "spectrum data does not match the frequency grid; "
            "imported spectra require 'Imported' frequency discretization"
        )
    S = S_f / (2.0 * np.pi)

    wave_power = wave_power_irregular(
        S, grid.w, grid.dw, k, gravity, density, water_depth, deep_water
    )

    if freq_disc != FreqDisc.EQUAL_ENERGY:
        return SpectrumState(
            grid=grid, S=S, A=2.0 * S, wave_power=wave_power, gamma=gamma_used
        )

    boundaries, bin_energy = equal_energy_rebin(freq, S_f, num_freq)
    interior = boundaries[1:-1]
    w = 2.0 * np.pi * freq[interior]
    dw = np.concatenate(([w[0] - 2.0 * np.pi * freq[boundaries[0]]], np.diff(w)))
    S = S[interior]
    return SpectrumState(
        grid=FrequencyGrid(w=w, dw=dw),
        S=S,
        A=2.0 * S,
        wave_power=wave_power,
        gamma=gamma_used,
        bin_boundaries=boundaries,
        bin_energy=bin_energy,
    )


def spectrum_statistics(w: np.ndarray, S: np.ndarray) -> Tuple[float, float]:
    """
    波浪谱统计量。

    Returns:
        (Hm0 = 4√m0（米）, 谱峰周期 Tp = 2π/ω_peak（秒）)
    """
    m0 = trapezoid(S, w)
    wp = w[int(np.argmax(np.abs(S)))]
    return 4.0 * math.sqrt(m0), 2.0 * math.pi / wp
