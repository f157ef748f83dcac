"""
波浪相位测试。
"""

import numpy as np

from wavekin.schemas.data import FreqDisc
from wavekin.services.phase import generate_phases, phase_rng


def test_seeded_phases_reproducible():
    """相同非零种子得到相同相位。"""
    p1 = generate_phases(50, 2, FreqDisc.TRADITIONAL, phase_rng(7))
    p2 = generate_phases(50, 2, FreqDisc.TRADITIONAL, phase_rng(7))

    assert p1.shape == (50, 2)
    assert np.array_equal(p1, p2)


def test_different_seeds_differ():
    """不同种子得到不同相位。"""
    p1 = generate_phases(50, 1, FreqDisc.EQUAL_ENERGY, phase_rng(1))
    p2 = generate_phases(50, 1, FreqDisc.EQUAL_ENERGY, phase_rng(2))

    assert not np.array_equal(p1, p2)


def test_zero_seed_not_reproducible():
    """种子为 0 时每次抽样不同。"""
    p1 = generate_phases(50, 1, FreqDisc.TRADITIONAL, phase_rng(0))
    p2 = generate_phases(50, 1, FreqDisc.TRADITIONAL, phase_rng(0))

    assert not np.array_equal(p1, p2)


def test_phase_range():
    """随机相位落在 [0, 2π)。"""
    phase = generate_phases(200, 3, FreqDisc.TRADITIONAL, phase_rng(3))

    assert np.all(phase >= 0)
    assert np.all(phase < 2 * np.pi)


def test_imported_phase_column():
    """导入表格含第三列时直接使用其相位。"""
    table = np.array(
        [
            [0.01, 0.0, 9.0],
            [0.1, 0.2, 0.5],
            [0.2, 0.5, 1.5],
            [0.4, 0.3, 2.5],
        ]
    )
    bem = (2 * np.pi * 0.05, 2 * np.pi * 0.5)

    phase = generate_phases(3, 2, FreqDisc.IMPORTED, phase_rng(1), table, bem)

    assert phase.shape == (3, 1)
    assert np.allclose(phase[:, 0], [0.5, 1.5, 2.5])


def test_imported_without_phase_column_is_random():
    """导入表格无相位列时抽取单列随机相位。"""
    table = np.array([[0.1, 0.2], [0.2, 0.5], [0.4, 0.3]])
    bem = (2 * np.pi * 0.05, 2 * np.pi * 0.5)

    phase = generate_phases(3, 2, FreqDisc.IMPORTED, phase_rng(1), table, bem)

    assert phase.shape == (3, 1)
    assert np.all((phase >= 0) & (phase < 2 * np.pi))
