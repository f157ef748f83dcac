"""
波浪谱与波能流测试。
"""

import numpy as np
import pytest
from scipy.integrate import trapezoid

from wavekin.core.exceptions import UnsupportedSpectrumError, WaveConfigError
from wavekin.schemas.data import FreqDisc, SpectrumType
from wavekin.services.dispersion import wave_number
from wavekin.services.frequency import discretize_frequency, imported_frequency_grid
from wavekin.services.spectrum import (
    estimate_gamma,
    generate_spectrum,
    jonswap_spectrum,
    pm_spectrum,
    spectral_density,
    spectrum_statistics,
    wave_power_irregular,
    wave_power_regular,
)

G = 9.81
RHO = 1000.0
BEM_FREQ = (0.02, 5.2)


def _spectrum(spectrum_type, freq_disc=FreqDisc.TRADITIONAL, T=8.0, H=2.0, gamma=None,
              depth=200.0, deep=True):
    grid, n = discretize_frequency(freq_disc, BEM_FREQ)
    k = wave_number(grid.w, G, depth, deep)
    return generate_spectrum(
        grid, n, freq_disc, spectrum_type, T, H, k, G, RHO, depth, deep, gamma=gamma
    )


def test_pm_significant_wave_height():
    """PM 光谱 4√m0 ≈ H。"""
    spectrum = _spectrum(SpectrumType.PM)
    Hm0, Tp = spectrum_statistics(spectrum.grid.w, spectrum.S)

    assert Hm0 == pytest.approx(2.0, rel=1e-2)
    assert Tp == pytest.approx(8.0, rel=1e-2)


def test_jonswap_significant_wave_height():
    """JONSWAP 光谱 4√m0 ≈ H（归一化常数为近似）。"""
    spectrum = _spectrum(SpectrumType.JS, gamma=3.3)
    Hm0, Tp = spectrum_statistics(spectrum.grid.w, spectrum.S)

    assert spectrum.gamma == 3.3
    assert Hm0 == pytest.approx(2.0, rel=5e-2)
    assert Tp == pytest.approx(8.0, rel=1e-2)


def test_jonswap_with_unit_gamma_equals_pm():
    """γ = 1 时 JONSWAP 退化为 PM。"""
    freq = np.linspace(0.05, 0.5, 50)
    S_js, gamma = jonswap_spectrum(freq, 8.0, 2.0, gamma=1.0)

    assert gamma == 1.0
    assert np.allclose(S_js, pm_spectrum(freq, 8.0, 2.0))


@pytest.mark.parametrize(
    "T, H, expected",
    [
        (5.0, 4.0, 5.0),  # T/√H = 2.5
        (8.0, 2.0, 1.0),  # T/√H ≈ 5.66
        (8.0, 4.0, np.exp(5.75 - 1.15 * 4.0)),  # T/√H = 4
    ],
)
def test_estimate_gamma(T, H, expected):
    """γ 由 T/√H 分段估算。"""
    assert estimate_gamma(T, H) == pytest.approx(expected)


def test_jonswap_estimates_gamma_when_missing():
    """未给出 γ 时使用估算值。"""
    freq = np.linspace(0.05, 0.5, 10)
    _, gamma = jonswap_spectrum(freq, 8.0, 4.0)

    assert gamma == pytest.approx(np.exp(5.75 - 1.15 * 4.0))


def test_spectrum_non_negative():
    """谱密度非负。"""
    for spectrum_type in (SpectrumType.PM, SpectrumType.JS):
        spectrum = _spectrum(spectrum_type)
        assert np.all(spectrum.S >= 0)
        assert np.allclose(spectrum.A, 2.0 * spectrum.S)


def test_jonswap_rejects_non_positive_normalization():
    """γ 过大使归一化常数 C ≤ 0 时报配置错误。"""
    freq = np.linspace(0.05, 0.5, 10)
    with pytest.raises(WaveConfigError):
        jonswap_spectrum(freq, 8.0, 2.0, gamma=40.0)


def test_bretschneider_rejected():
    """Bretschneider 光谱不再支持。"""
    freq = np.linspace(0.05, 0.5, 10)
    with pytest.raises(UnsupportedSpectrumError):
        spectral_density(SpectrumType.BS, freq, 8.0, 2.0)


def test_equal_energy_bins():
    """EqualEnergy 各分箱能量近似相等。"""
    spectrum = _spectrum(SpectrumType.PM, freq_disc=FreqDisc.EQUAL_ENERGY)

    fine_grid, n = discretize_frequency(FreqDisc.EQUAL_ENERGY, BEM_FREQ)
    freq = fine_grid.freq_hz
    m0 = trapezoid(pm_spectrum(freq, 8.0, 2.0), freq)

    assert spectrum.grid.num_freq == n == 500
    assert len(spectrum.S) == 500
    assert len(spectrum.bin_energy) == 501
    assert np.allclose(spectrum.bin_energy, m0 / 501, rtol=5e-2)
    assert np.all(np.diff(spectrum.grid.w) > 0)
    assert np.all(spectrum.grid.dw > 0)


def test_equal_energy_preserves_significant_wave_height():
    """重分箱后 Σ A·dw 仍接近 H²/8。"""
    spectrum = _spectrum(SpectrumType.PM, freq_disc=FreqDisc.EQUAL_ENERGY)
    variance = np.sum(spectrum.S * spectrum.grid.dw)

    assert 4.0 * np.sqrt(variance) == pytest.approx(2.0, rel=5e-2)


def test_deep_and_finite_depth_power_agree_in_deep_water():
    """水深很大时有限水深波能流与深水公式一致。"""
    deep = _spectrum(SpectrumType.PM, depth=200.0, deep=True)
    finite = _spectrum(SpectrumType.PM, depth=5000.0, deep=False)

    assert deep.wave_power > 0
    assert finite.wave_power == pytest.approx(deep.wave_power, rel=1e-3)


def test_wave_power_scales_with_density():
    """波能流与密度成正比。"""
    w = np.linspace(0.3, 2.0, 20)
    dw = np.full(20, w[1] - w[0])
    S = np.ones(20)
    k = w**2 / G

    p1 = wave_power_irregular(S, w, dw, k, G, 1000.0, 200.0, True)
    p2 = wave_power_irregular(S, w, dw, k, G, 1025.0, 200.0, True)

    assert p2 / p1 == pytest.approx(1.025)


def test_regular_power_deep_and_finite_agree():
    """规则波：深水公式与大水深有限水深公式一致。"""
    A, T = 1.0, 8.0
    w = 2 * np.pi / T
    k_deep = w**2 / G

    deep = wave_power_regular(A, T, k_deep, G, RHO, 200.0, True)
    finite = wave_power_regular(A, T, k_deep, G, RHO, 5000.0, False)

    assert deep == pytest.approx(RHO * G**2 * A**2 * T / (8 * np.pi))
    assert finite == pytest.approx(deep, rel=1e-6)


def test_imported_spectrum_converted_to_angular_frequency():
    """导入谱密度由 Hz 转换为 rad/s 单位。"""
    table = np.array(
        [
            [0.01, 9.0],
            [0.1, 0.2],
            [0.2, 0.5],
            [0.4, 0.3],
        ]
    )
    bem = (2 * np.pi * 0.05, 2 * np.pi * 0.5)
    grid = imported_frequency_grid(table, bem)
    k = grid.w**2 / G

    spectrum = generate_spectrum(
        grid, grid.num_freq, FreqDisc.IMPORTED, SpectrumType.IMPORTED, 0.0, 0.0, k,
        G, RHO, 200.0, True, spectrum_table=table, bem_freq=bem,
    )

    assert np.allclose(spectrum.S, np.array([0.2, 0.5, 0.3]) / (2 * np.pi))
    assert spectrum.bin_energy is None
