"""
全局配置模块。

集中管理波浪合成的默认物理常数与数值参数：
- 重力加速度、流体密度
- 无限水深时用于可视化的参考水深
- 频率离散默认点数（Traditional / EqualEnergy）与等能量细网格点数
- 色散关系不动点迭代次数

所有字段均可通过 ``WAVEKIN_`` 前缀的环境变量覆盖。
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置。"""

    model_config = SettingsConfigDict(env_prefix="WAVEKIN_")

    app_name: str = "WaveKin Backend"

    gravity: float = 9.81  # 重力加速度（m/s²）
    density: float = 1000.0  # 流体密度（kg/m³）
    infinite_depth_viz: float = 200.0  # 无限水深时的可视化参考水深（米）

    traditional_num_freq: int = 1000  # Traditional 默认频率点数
    equal_energy_num_freq: int = 500  # EqualEnergy 默认频率点数
    equal_energy_fine_intervals: int = 500000  # EqualEnergy 细网格区间数

    dispersion_iterations: int = 100  # 色散关系不动点迭代次数
    dispersion_tolerance: Optional[float] = None  # 提前退出容差，None 表示固定迭代


settings = Settings()
