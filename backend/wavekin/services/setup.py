"""
波浪 setup 流水线。

根据波浪配置、水动力输入与运行参数，依次执行：
频率离散 → 相位 → 波浪谱与波能流 → 色散关系 → 波面时程，
生成只读的波浪运行时状态。非谱类型跳过谱相关步骤。
"""

import logging
import math
from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np

from wavekin.core.config import settings
from wavekin.core.exceptions import UnsupportedSpectrumError, WaveConfigError
from wavekin.models.frequency import FrequencyGrid
from wavekin.models.wave import WaveRuntimeState
from wavekin.schemas.base import HydroConfig, RunConfig, WaveConfig
from wavekin.schemas.data import (
    NO_WAVE_TYPES,
    REGULAR_TYPES,
    SPECTRAL_TYPES,
    FreqDisc,
    SpectrumType,
    WaveType,
)
from wavekin.services.dispersion import wave_number
from wavekin.services.elevation import synthesize_elevation
from wavekin.services.frequency import discretize_frequency
from wavekin.services.phase import generate_phases, phase_rng
from wavekin.services.spectrum import generate_spectrum, wave_power_regular
from wavekin.utils.tables import load_table

logger = logging.getLogger(__name__)


def check_inputs(wave: WaveConfig) -> None:
    """
    检查所选波浪类型的必需字段。

    Raises:
        WaveConfigError: 缺少必需字段
        UnsupportedSpectrumError: 请求了 Bretschneider 光谱
    """
    wave_type = wave.wave_type

    if wave_type == WaveType.NO_WAVE and wave.T is None:
        raise WaveConfigError(
            '"T" must be defined for the hydrodynamic data period when using the "noWave" wave type'
        )

    if wave_type in REGULAR_TYPES and (wave.T is None or wave.H is None):
        raise WaveConfigError(
            f'"T" and "H" must be defined when using the "{wave_type.value}" wave type'
        )

    if wave_type == WaveType.IRREGULAR:
        if wave.T is None or not wave.H:
            raise WaveConfigError(
                '"T" and a positive "H" must be defined when using the "irregular" wave type'
            )
        if wave.spectrum_type == SpectrumType.BS:
            raise UnsupportedSpectrumError(
                'Bretschneider Spectrum ("BS" option) is no longer supported'
            )
        if wave.spectrum_type not in (SpectrumType.PM, SpectrumType.JS):
            raise WaveConfigError(
                '"spectrum_type" must be "PM" or "JS" when using the "irregular" wave type'
            )

    needs_spectrum_data = wave_type == WaveType.SPECTRUM_IMPORT or (
        wave_type == WaveType.IRREGULAR and wave.freq_disc == FreqDisc.IMPORTED
    )
    if needs_spectrum_data and wave.spectrum_data is None and wave.spectrum_data_file is None:
        raise WaveConfigError(
            'The spectrum data must be defined when using the "spectrumImport" wave type '
            'or the "Imported" frequency discretization'
        )

    if (
        wave_type == WaveType.ETA_IMPORT
        and wave.eta_data is None
        and wave.eta_data_file is None
    ):
        raise WaveConfigError(
            'The eta data must be defined when using the "etaImport" wave type'
        )


def _resolve_depth(hydro: HydroConfig) -> Tuple[float, bool]:
    """返回 (水深, 是否深水)；无限水深映射为可视化参考水深。"""
    if hydro.deep_water:
        logger.info(
            f'Infinite water depth specified in BEM, water depth set to '
            f'{settings.infinite_depth_viz:g}m for visualization.'
        )
        return settings.infinite_depth_viz, True
    return float(hydro.water_depth), False


def _no_wave_state(
    wave: WaveConfig,
    hydro: HydroConfig,
    run: RunConfig,
    base: Dict[str, Any],
    rng: Optional[np.random.Generator],
) -> WaveRuntimeState:
    """noWave / noWaveCIC：波高为零，但仍需确定频率与波数。"""
    if wave.T is None:
        # 仅 noWaveCIC 可到达此处，取 BEM 最小频率
        w = min(hydro.bem_freq)
        T = 2.0 * math.pi / w
    else:
        T = wave.T
        w = 2.0 * math.pi / T

    grid = FrequencyGrid(w=np.array([w]), dw=np.zeros(1))
    k = wave_number(grid.w, run.gravity, base["water_depth"], base["deep_water"])
    return WaveRuntimeState(
        wave_type=wave.wave_type,
        H=0.0,
        T=T,
        freq_disc=None,
        grid=grid,
        k=k,
        A=np.zeros(1),
        **base,
    )


def _regular_state(
    wave: WaveConfig,
    hydro: HydroConfig,
    run: RunConfig,
    base: Dict[str, Any],
    rng: Optional[np.random.Generator],
) -> WaveRuntimeState:
    """regular / regularCIC：单频余弦波。"""
    w = 2.0 * math.pi / wave.T
    A = wave.H / 2.0
    grid = FrequencyGrid(w=np.array([w]), dw=np.zeros(1))
    k = wave_number(grid.w, run.gravity, base["water_depth"], base["deep_water"])
    power = wave_power_regular(
        A,
        wave.T,
        float(k[0]),
        run.gravity,
        run.density,
        base["water_depth"],
        base["deep_water"],
    )
    return WaveRuntimeState(
        wave_type=wave.wave_type,
        H=wave.H,
        T=wave.T,
        freq_disc=None,
        grid=grid,
        k=k,
        A=np.array([A]),
        wave_power=power,
        **base,
    )


def _spectral_state(
    wave: WaveConfig,
    hydro: HydroConfig,
    run: RunConfig,
    base: Dict[str, Any],
    rng: Optional[np.random.Generator],
) -> WaveRuntimeState:
    """irregular / spectrumImport：频率离散、相位、波浪谱、波数。"""
    if wave.wave_type == WaveType.SPECTRUM_IMPORT:
        freq_disc = FreqDisc.IMPORTED
        spectrum_type = SpectrumType.IMPORTED
        H, T = 0.0, 0.0
    else:
        freq_disc = wave.freq_disc
        spectrum_type = wave.spectrum_type
        H, T = wave.H, wave.T

    spectrum_table = None
    if freq_disc == FreqDisc.IMPORTED:
        spectrum_table = load_table(
            wave.spectrum_data, wave.spectrum_data_file, "spectrum data"
        )

    water_depth, deep_water = base["water_depth"], base["deep_water"]
    grid, num_freq = discretize_frequency(
        freq_disc, hydro.bem_freq, wave.freq_range, wave.num_freq, spectrum_table
    )

    if rng is None:
        rng = phase_rng(wave.phase_seed)
    phase = generate_phases(
        num_freq,
        len(wave.wave_dir),
        freq_disc,
        rng,
        spectrum_table,
        hydro.bem_freq,
    )
    if spectrum_table is not None and spectrum_table.shape[1] == 3:
        logger.info("Wave phase: Imported Phase")
    elif wave.phase_seed == 0:
        logger.info("Wave phase: Arbitrary Random Phase")
    else:
        logger.info(f"Wave phase: Predefined Random Phase (seed {wave.phase_seed})")

    # 波能流使用重分箱前网格上的波数
    k_fine = wave_number(grid.w, run.gravity, water_depth, deep_water)
    spectrum = generate_spectrum(
        grid,
        num_freq,
        freq_disc,
        spectrum_type,
        T,
        H,
        k_fine,
        run.gravity,
        run.density,
        water_depth,
        deep_water,
        gamma=wave.gamma,
        spectrum_table=spectrum_table,
        bem_freq=hydro.bem_freq,
    )
    if spectrum.grid is grid:
        k = k_fine
    else:
        k = wave_number(spectrum.grid.w, run.gravity, water_depth, deep_water)

    return WaveRuntimeState(
        wave_type=wave.wave_type,
        H=H,
        T=T,
        freq_disc=freq_disc,
        grid=spectrum.grid,
        k=k,
        A=spectrum.A,
        phase=phase,
        spectrum=spectrum,
        wave_power=spectrum.wave_power,
        **base,
    )


def _eta_import_state(
    wave: WaveConfig,
    hydro: HydroConfig,
    run: RunConfig,
    base: Dict[str, Any],
    rng: Optional[np.random.Generator],
) -> WaveRuntimeState:
    """etaImport：波面直接来自导入时程，无频率成分。"""
    empty = np.zeros(0)
    return WaveRuntimeState(
        wave_type=wave.wave_type,
        H=wave.H or 0.0,
        T=wave.T or 0.0,
        freq_disc=None,
        grid=FrequencyGrid(w=empty, dw=empty),
        k=empty,
        A=empty,
        **base,
    )


StateBuilder = Callable[..., WaveRuntimeState]

# 每个波浪类型对应一个 setup 处理器
SETUP_HANDLERS: Dict[WaveType, StateBuilder] = {
    WaveType.NO_WAVE: _no_wave_state,
    WaveType.NO_WAVE_CIC: _no_wave_state,
    WaveType.REGULAR: _regular_state,
    WaveType.REGULAR_CIC: _regular_state,
    WaveType.IRREGULAR: _spectral_state,
    WaveType.SPECTRUM_IMPORT: _spectral_state,
    WaveType.ETA_IMPORT: _eta_import_state,
}


def wave_setup(
    wave: WaveConfig,
    hydro: HydroConfig,
    run: RunConfig,
    rng: Optional[np.random.Generator] = None,
) -> WaveRuntimeState:
    """
    完整波浪 setup 流程。

    每次调用都生成一组全新的、相互独立的结果，不修改输入。

    Args:
        wave: 波浪配置
        hydro: 水动力输入（BEM 频率范围、水深）
        run: 运行参数
        rng: 相位随机源，None 时按 wave.phase_seed 构造

    Returns:
        波浪运行时状态
    """
    check_inputs(wave)
    handler = SETUP_HANDLERS.get(wave.wave_type)
    if handler is None:
        raise WaveConfigError(
            "Unexpected wave environment type setting, choose from: "
            + ", ".join(f'"{t.value}"' for t in WaveType)
        )

    water_depth, deep_water = _resolve_depth(hydro)
    base = dict(
        config=wave,
        wave_dir=np.radians(np.asarray(wave.wave_dir, dtype=float)),
        wave_spread=np.asarray(wave.wave_spread, dtype=float),
        water_depth=water_depth,
        deep_water=deep_water,
        gravity=run.gravity,
        density=run.density,
    )
    state = handler(wave, hydro, run, base, rng)

    eta_table = None
    if wave.wave_type == WaveType.ETA_IMPORT:
        eta_table = load_table(wave.eta_data, wave.eta_data_file, "eta data")

    elevation = synthesize_elevation(
        state, run.iteration_count, run.dt, run.ramp_time, eta_table
    )
    state = replace(state, elevation=elevation)
    log_wave_info(state)
    return state


def log_wave_info(state: WaveRuntimeState) -> None:
    """记录波浪环境摘要。"""
    wave = state.config
    wave_type = state.wave_type
    logger.info("Wave Environment:")

    if wave_type in NO_WAVE_TYPES:
        logger.info(f"\tWave Type = No Wave ({wave_type.value})")
        logger.info(f"\tHydro Data Wave Period, T (sec) = {state.T:g}")
    elif wave_type in REGULAR_TYPES:
        logger.info(f"\tWave Type = Regular Waves ({wave_type.value})")
        logger.info(f"\tWave Height, H (m) = {state.H:g}")
        logger.info(f"\tWave Period, T (sec) = {state.T:g}")
    elif wave_type in SPECTRAL_TYPES:
        logger.info(f"\tWave Type = Irregular Waves ({wave_type.value})")
        spectrum_type = (
            SpectrumType.IMPORTED
            if wave_type == WaveType.SPECTRUM_IMPORT
            else wave.spectrum_type
        )
        logger.info(f"\tSpectrum Type = {spectrum_type.value}")
        logger.info(f"\tSignificant Wave Height, Hs (m) = {state.H:g}")
        logger.info(f"\tPeak Wave Period, Tp (sec) = {state.T:g}")
        logger.info(f"\tNumber of Frequencies = {state.grid.num_freq}")
    else:
        logger.info("\tWave Type = Waves with imported wave elevation time-history")

    if state.wave_power is not None:
        logger.info(f"\tWave Power, Pw (W/m) = {state.wave_power:g}")

