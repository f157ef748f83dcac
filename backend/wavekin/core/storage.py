"""
波浪状态存储模块。

使用内存存储 setup 生成的波浪运行时状态。
"""

from typing import Dict, List, Optional

from wavekin.models.wave import WaveRuntimeState


class WaveStorage:
    """波浪状态存储（内存）。"""

    def __init__(self):
        self._waves: Dict[str, WaveRuntimeState] = {}

    def add_wave(self, wave_id: str, state: WaveRuntimeState) -> None:
        """添加波浪状态。"""
        self._waves[wave_id] = state

    def get_wave(self, wave_id: str) -> Optional[WaveRuntimeState]:
        """获取波浪状态。"""
        return self._waves.get(wave_id)

    def remove_wave(self, wave_id: str) -> bool:
        """删除波浪状态，返回是否存在。"""
        return self._waves.pop(wave_id, None) is not None

    def list_waves(self) -> List[str]:
        """列出所有波浪 ID。"""
        return list(self._waves.keys())

    def clear(self) -> None:
        """清空存储。"""
        self._waves.clear()


# 全局波浪状态存储实例
wave_storage = WaveStorage()
