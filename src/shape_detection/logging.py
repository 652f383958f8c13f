import logging
import logging.config
import os
from typing import Optional


def get_logging_config(level: Optional[str] = None) -> dict:
    """Get logging configuration dict for the shape detection package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to SHAPE_DETECTION_LOG_LEVEL environment variable or INFO.

    Returns:
        Dictionary suitable for logging.config.dictConfig()
    """
    if level is None:
        level = os.environ.get('SHAPE_DETECTION_LOG_LEVEL', 'INFO')

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            'shape_detection': {
                'level': level.upper(),
                'handlers': ['console'],
                'propagate': False
            },
            'shape_detection.classifier': {
                'level': 'DEBUG' if level.upper() == 'DEBUG' else 'WARNING',
                'handlers': ['console'],
                'propagate': False
            }
        }
    }


def configure_logging(level: Optional[str] = None, config: Optional[dict] = None) -> None:
    """
    Configure shape detection logging.

    Per-contour classification messages go to ``shape_detection.classifier``,
    which stays at WARNING unless the level is DEBUG.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to SHAPE_DETECTION_LOG_LEVEL environment variable or INFO.
        config: Optional custom logging config dict. If provided, it will be used
                instead of the default config. Must follow logging.config.dictConfig format.

    Examples:
        >>> from shape_detection.logging import configure_logging
        >>> configure_logging(level='DEBUG')
    """
    if config is None:
        config = get_logging_config(level)

    logging.config.dictConfig(config)
