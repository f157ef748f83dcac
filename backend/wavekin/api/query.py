"""
查询相关 API 路由。
"""

import numpy as np
from fastapi import APIRouter, HTTPException, Query

from wavekin.core.wave_manager import get_wave
from wavekin.models.wave import WaveRuntimeState
from wavekin.schemas.api import (
    ElevationResponse,
    FieldRequest,
    FieldResponse,
    SpectrumResponse,
)
from wavekin.schemas.data import ElevationSeriesData, SpectrumData
from wavekin.services.field import evaluate_field, field_grid
from wavekin.services.spectrum import spectrum_statistics

router = APIRouter(tags=["query"])


def _ensure_wave(wave_id: str) -> WaveRuntimeState:
    state = get_wave(wave_id)
    if state is None:
        raise HTTPException(status_code=404, detail=f"Wave {wave_id} not found")
    return state


@router.get(
    "/waves/{wave_id}/spectrum",
    response_model=SpectrumResponse,
    summary="获取离散波浪谱",
)
async def get_spectrum(wave_id: str) -> SpectrumResponse:
    """
    获取离散波浪谱。

    返回频率、带宽、波数；谱类型波浪额外返回谱密度、振幅系数以及 Hm0、Tp 统计量。
    """
    state = _ensure_wave(wave_id)
    data = SpectrumData(
        w=state.w.tolist(),
        dw=state.dw.tolist(),
        k=state.k.tolist(),
    )

    if state.spectrum is not None:
        Hm0, Tp = spectrum_statistics(state.spectrum.grid.w, state.spectrum.S)
        data = SpectrumData(
            w=data.w,
            dw=data.dw,
            k=data.k,
            S=state.spectrum.S.tolist(),
            A=state.spectrum.A.tolist(),
            Hm0=Hm0,
            Tp=Tp,
            gamma=state.spectrum.gamma,
        )

    return SpectrumResponse(wave_id=wave_id, spectrum=data)


@router.get(
    "/waves/{wave_id}/elevation",
    response_model=ElevationResponse,
    summary="获取波面时程",
)
async def get_elevation(
    wave_id: str,
    stride: int = Query(1, ge=1, description="抽样间隔（每 stride 个采样点取一个）"),
) -> ElevationResponse:
    """获取原点与三个浪高仪的波面时程。"""
    state = _ensure_wave(wave_id)
    series = [
        ElevationSeriesData(
            name=s.name,
            x=s.x,
            y=s.y,
            time=s.time[::stride].tolist(),
            elevation=s.elevation[::stride].tolist(),
        )
        for s in state.elevation.all_series()
    ]
    return ElevationResponse(wave_id=wave_id, series=series)


@router.post(
    "/waves/{wave_id}/field",
    response_model=FieldResponse,
    summary="计算波面场",
)
def get_field(wave_id: str, request: FieldRequest) -> FieldResponse:
    """
    计算指定时刻的波面场。

    给出 x、y 时在其网格上求值，否则在 [-domain_size, domain_size]² 上的规则网格求值。
    """
    state = _ensure_wave(wave_id)
    if request.x is not None:
        X, Y = np.meshgrid(request.x, request.y)
    else:
        X, Y = field_grid(
            request.domain_size, request.num_points_x, request.num_points_y
        )

    Z = evaluate_field(state, request.time, X, Y)
    return FieldResponse(
        wave_id=wave_id,
        time=request.time,
        x=X[0, :].tolist(),
        y=Y[:, 0].tolist(),
        z=Z.tolist(),
    )
