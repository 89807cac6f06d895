"""
Utilities package.
"""
from .config_loader import get_config, load_config, Config
from .logging_config import get_logger, reconfigure_logging, setup_logging
from .exceptions import (
    FaceAestheticsError,
    InvalidImageError,
    NoFaceDetectedError,
    LandmarkIndexError,
    ConfigurationError,
    DetectionError,
)

# image_utils / json_exporter 는 models 에 의존하므로 직접 import 해서 사용

__all__ = [
    'get_config', 'load_config', 'Config',
    'get_logger', 'setup_logging', 'reconfigure_logging',
    'FaceAestheticsError', 'InvalidImageError', 'NoFaceDetectedError',
    'LandmarkIndexError', 'ConfigurationError', 'DetectionError',
]
