"""
WaveKin：海浪运动学合成。

由少量物理参数生成波面时程、谱密度、波数与空间波面场，作为机械仿真的波浪激励输入。
"""

__version__ = "0.1.0"
