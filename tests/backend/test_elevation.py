"""
波面时程合成测试。
"""

import numpy as np
import pytest

from wavekin.schemas.base import HydroConfig, RunConfig, WaveConfig
from wavekin.schemas.data import WaveType
from wavekin.services.setup import wave_setup
from wavekin.services.surface import SURFACE_HANDLERS
from wavekin.utils.numerical import ramp_window

HYDRO = HydroConfig(bem_freq=(0.02, 5.2), water_depth="infinite")


def _regular(**kwargs):
    params = dict(wave_type=WaveType.REGULAR, T=8.0, H=2.0)
    params.update(kwargs)
    return WaveConfig(**params)


def test_ramp_window_shape():
    """斜坡窗从 0 单调上升到 1，之后恒为 1。"""
    window = ramp_window(301, ramp_time=20.0, dt=0.1)

    assert window[0] == 0.0
    assert np.all(np.diff(window[:201]) >= 0)
    assert np.allclose(window[200:], 1.0)


def test_ramp_window_disabled():
    """ramp_time 为 0 时不加斜坡。"""
    assert np.all(ramp_window(10, ramp_time=0.0, dt=0.1) == 1.0)


def test_sample_count_and_times():
    """时程共 max_iteration_count + 1 个点，步长为 dt。"""
    state = wave_setup(_regular(), HYDRO, RunConfig(dt=0.1, max_iteration_count=50))
    origin = state.elevation.origin

    assert len(origin.time) == len(origin.elevation) == 51
    assert origin.time[0] == 0.0
    assert origin.dt == pytest.approx(0.1)


def test_regular_wave_height():
    """规则波峰谷差等于波高。"""
    state = wave_setup(_regular(), HYDRO, RunConfig(dt=0.1, max_iteration_count=800))
    eta = state.elevation.origin.elevation

    assert eta[0] == pytest.approx(1.0)
    assert eta.max() - eta.min() == pytest.approx(2.0, abs=1e-9)


def test_regular_gauge_phase_shift():
    """浪高仪时程为原点时程按 k·Δ 平移的余弦。"""
    wave = _regular(wave_dir=(30.0,), wave_gauge1_loc=(10.0, 5.0))
    state = wave_setup(wave, HYDRO, RunConfig(dt=0.1, max_iteration_count=200))

    t = state.elevation.origin.time
    delta = 10.0 * np.cos(np.radians(30.0)) + 5.0 * np.sin(np.radians(30.0))
    expected = 1.0 * np.cos(state.w[0] * t - state.k[0] * delta)

    assert np.allclose(state.elevation.gauges[0].elevation, expected)


def test_gauge_perpendicular_to_direction_matches_origin():
    """垂直于波向的浪高仪与原点同相。"""
    wave = _regular(wave_dir=(90.0,), wave_gauge2_loc=(25.0, 0.0))
    state = wave_setup(wave, HYDRO, RunConfig(dt=0.1, max_iteration_count=100))

    assert np.allclose(
        state.elevation.gauges[1].elevation, state.elevation.origin.elevation
    )


def test_ramp_applied_to_elevation():
    """斜坡期间波面被窗函数削减，之后与未加斜坡一致。"""
    run_ramp = RunConfig(dt=0.1, max_iteration_count=400, ramp_time=20.0)
    run_plain = RunConfig(dt=0.1, max_iteration_count=400)

    ramped = wave_setup(_regular(), HYDRO, run_ramp).elevation.origin.elevation
    plain = wave_setup(_regular(), HYDRO, run_plain).elevation.origin.elevation

    assert ramped[0] == 0.0
    assert np.all(np.abs(ramped[:200]) <= np.abs(plain[:200]) + 1e-12)
    assert np.allclose(ramped[200:], plain[200:])


def test_no_wave_is_flat():
    """noWave 时程全为零，但波数仍按周期求出。"""
    wave = WaveConfig(wave_type=WaveType.NO_WAVE, T=6.0)
    state = wave_setup(wave, HYDRO, RunConfig(dt=0.1, max_iteration_count=30))

    for series in state.elevation.all_series():
        assert len(series.elevation) == 31
        assert np.all(series.elevation == 0.0)
    assert state.H == 0.0
    assert state.k[0] == pytest.approx((2 * np.pi / 6.0) ** 2 / 9.81)


def test_irregular_origin_is_superposition():
    """不规则波原点时程为各波向、各频率成分之和。"""
    wave = WaveConfig(
        wave_type=WaveType.IRREGULAR,
        T=8.0,
        H=2.0,
        spectrum_type="PM",
        phase_seed=3,
        freq_disc="Traditional",
        num_freq=20,
        wave_dir=(0.0, 45.0),
        wave_spread=(0.7, 0.3),
        wave_gauge1_loc=(15.0, -5.0),
    )
    state = wave_setup(wave, HYDRO, RunConfig(dt=0.5, max_iteration_count=40))
    t = state.elevation.origin.time

    def manual(x, y):
        eta = np.zeros_like(t)
        for idir, direction in enumerate(state.wave_dir):
            delta = x * np.cos(direction) + y * np.sin(direction)
            for j in range(len(state.w)):
                eta += np.sqrt(
                    state.A[j] * state.dw[j] * state.wave_spread[idir]
                ) * np.cos(state.w[j] * t - state.k[j] * delta + state.phase[j, idir])
        return eta

    assert state.phase.shape == (20, 2)
    assert np.allclose(state.elevation.origin.elevation, manual(0.0, 0.0))
    assert np.allclose(state.elevation.gauges[0].elevation, manual(15.0, -5.0))


def test_eta_import_reproduces_data_points():
    """etaImport 在数据点处精确复现导入波面。"""
    times = np.arange(0.0, 10.5, 0.5)
    values = 0.3 * np.sin(0.7 * times)
    wave = WaveConfig(
        wave_type=WaveType.ETA_IMPORT,
        eta_data=tuple(zip(times.tolist(), values.tolist())),
        wave_gauge1_loc=(20.0, 0.0),
    )
    state = wave_setup(wave, HYDRO, RunConfig(dt=0.5, max_iteration_count=20))

    assert np.allclose(state.elevation.origin.elevation, values)


def test_eta_import_gauges_are_not_directionally_offset():
    """etaImport 的浪高仪不做波向平移，波面为零，仅保留时间列。"""
    times = np.arange(0.0, 5.5, 0.5)
    wave = WaveConfig(
        wave_type=WaveType.ETA_IMPORT,
        eta_data=tuple(zip(times.tolist(), np.cos(times).tolist())),
    )
    state = wave_setup(wave, HYDRO, RunConfig(dt=0.5, max_iteration_count=10))

    for gauge in state.elevation.gauges:
        assert np.array_equal(gauge.time, state.elevation.origin.time)
        assert np.all(gauge.elevation == 0.0)


def test_eta_import_from_file(tmp_path):
    """etaImport 可从文本文件读取时程。"""
    path = tmp_path / "eta.txt"
    path.write_text("0.0 0.0\n1.0 0.5\n2.0 1.0\n")
    wave = WaveConfig(wave_type=WaveType.ETA_IMPORT, eta_data_file=str(path))
    state = wave_setup(wave, HYDRO, RunConfig(dt=0.5, max_iteration_count=4))

    assert np.allclose(state.elevation.origin.elevation, [0.0, 0.25, 0.5, 0.75, 1.0])


def test_surface_handlers_cover_every_wave_type():
    """每个波浪类型都有波面公式。"""
    assert set(SURFACE_HANDLERS) == set(WaveType)
