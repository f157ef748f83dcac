"""
业务服务模块。

包含频率离散、色散关系、波浪谱、相位、波面时程、波面场与 setup 流水线等服务。
"""

from wavekin.services.dispersion import wave_number
from wavekin.services.elevation import synthesize_elevation
from wavekin.services.field import evaluate_field, field_grid
from wavekin.services.frequency import discretize_frequency, effective_range
from wavekin.services.phase import generate_phases, phase_rng
from wavekin.services.setup import check_inputs, wave_setup
from wavekin.services.spectrum import generate_spectrum, spectrum_statistics

__all__ = [
    "effective_range",
    "discretize_frequency",
    "wave_number",
    "generate_spectrum",
    "spectrum_statistics",
    "phase_rng",
    "generate_phases",
    "synthesize_elevation",
    "evaluate_field",
    "field_grid",
    "check_inputs",
    "wave_setup",
]
