from .config import Settings, VizHashConfig, get_settings

__all__ = [
    "Settings",
    "VizHashConfig",
    "get_settings",
]
