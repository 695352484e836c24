from app.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    WORDS_PER_MINUTE,
    LimiterConfig,
    file_logger,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "LimiterConfig",
    "WORDS_PER_MINUTE",
    "file_logger",
    "settings",
]
