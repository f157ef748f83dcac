"""
波浪环境管理器。

提供波浪环境的创建、获取、删除等功能。
"""

import logging
import uuid
from typing import Optional, Tuple

from wavekin.core.storage import wave_storage
from wavekin.models.wave import WaveRuntimeState
from wavekin.schemas.base import HydroConfig, RunConfig, WaveConfig
from wavekin.services.setup import wave_setup

logger = logging.getLogger(__name__)


def create_wave(
    wave: WaveConfig,
    hydro: HydroConfig,
    run: RunConfig,
) -> Tuple[str, WaveRuntimeState]:
    """
    运行 setup 流水线并存储结果。

    Args:
        wave: 波浪配置
        hydro: 水动力输入
        run: 运行参数

    Returns:
        (波浪 ID, 波浪运行时状态)
    """
    state = wave_setup(wave, hydro, run)
    wave_id = str(uuid.uuid4())
    wave_storage.add_wave(wave_id, state)
    logger.info(f"Created wave environment {wave_id[:8]}... ({wave.wave_type.value})")
    return wave_id, state


def get_wave(wave_id: str) -> Optional[WaveRuntimeState]:
    """
    获取波浪运行时状态。

    Args:
        wave_id: 波浪 ID

    Returns:
        波浪运行时状态，如果不存在则返回 None
    """
    return wave_storage.get_wave(wave_id)


def delete_wave(wave_id: str) -> bool:
    """
    删除波浪环境。

    Returns:
        是否删除成功
    """
    return wave_storage.remove_wave(wave_id)
