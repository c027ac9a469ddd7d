from .loader import DEFAULTS_PATH, load_config
from .schema import ContrastConfig, LoggingConfig, MercatorConfig, VizConfig

__all__ = [
    "DEFAULTS_PATH",
    "load_config",
    "ContrastConfig",
    "LoggingConfig",
    "MercatorConfig",
    "VizConfig",
]
