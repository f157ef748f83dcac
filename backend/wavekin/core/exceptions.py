"""
波浪合成错误类型。
"""


class WaveConfigError(ValueError):
    """波浪配置错误：未知波浪类型，或所选类型缺少必需字段。"""


class UnsupportedSpectrumError(NotImplementedError):
    """请求了已不再支持的波浪谱类型（如 Bretschneider）。"""
