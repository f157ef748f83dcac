"""
波浪环境 API 路由。
"""

from typing import List

from fastapi import APIRouter, Body, HTTPException

from wavekin.core.exceptions import UnsupportedSpectrumError, WaveConfigError
from wavekin.core.storage import wave_storage
from wavekin.core.wave_manager import create_wave, delete_wave
from wavekin.schemas.api import WaveSetupRequest, WaveSetupResponse

router = APIRouter(tags=["waves"])


@router.post(
    "/waves",
    response_model=WaveSetupResponse,
    status_code=201,
    summary="创建波浪环境",
)
def create_wave_environment(
    request: WaveSetupRequest = Body(
        ...,
        examples=[
            {
                "wave": {
                    "wave_type": "irregular",
                    "T": 8.0,
                    "H": 2.0,
                    "spectrum_type": "JS",
                    "phase_seed": 1,
                    "freq_disc": "Traditional",
                    "num_freq": 200,
                },
                "hydro": {
                    "bem_freq": [0.02, 5.2],
                    "water_depth": "infinite",
                },
                "run": {
                    "dt": 0.1,
                    "end_time": 400.0,
                    "ramp_time": 100.0,
                },
            },
        ],
    ),
) -> WaveSetupResponse:
    """
    创建波浪环境。

    根据波浪配置、BEM 频率范围与水深、运行参数执行 setup 流水线，
    返回 wave_id，用于后续查询波浪谱、波面时程与波面场。
    """
    try:
        wave_id, state = create_wave(request.wave, request.hydro, request.run)
    except WaveConfigError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except UnsupportedSpectrumError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return WaveSetupResponse(
        wave_id=wave_id,
        wave_type=state.wave_type,
        num_freq=state.grid.num_freq,
        wave_power=state.wave_power,
    )


@router.get(
    "/waves",
    response_model=List[str],
    summary="列出波浪环境",
)
async def list_wave_environments() -> List[str]:
    """列出所有已创建的波浪环境 ID。"""
    return wave_storage.list_waves()


@router.delete(
    "/waves/{wave_id}",
    status_code=204,
    summary="删除波浪环境",
)
async def delete_wave_environment(wave_id: str) -> None:
    """删除指定波浪环境，释放其时程与谱数据。"""
    if not delete_wave(wave_id):
        raise HTTPException(status_code=404, detail=f"Wave {wave_id} not found")
