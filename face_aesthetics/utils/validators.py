"""입력 검증 유틸리티 함수"""

import numpy as np

from .exceptions import InvalidImageError


def validate_rgba_array(pixels: np.ndarray) -> None:
    """
    RGBA 픽셀 배열 유효성 검증

    Args:
        pixels: (height, width, 4) uint8 배열

    Raises:
        InvalidImageError: 배열이 유효하지 않은 경우
    """
    if pixels is None:
        raise InvalidImageError("Image is None")

    if not isinstance(pixels, np.ndarray):
        raise InvalidImageError(f"Image must be numpy.ndarray, got {type(pixels)}")

    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise InvalidImageError(f"Image must have shape (height, width, 4), got {pixels.shape}")

    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise InvalidImageError("Image is empty")

    if pixels.dtype != np.uint8:
        raise InvalidImageError(f"Image dtype must be uint8, got {pixels.dtype}")


def validate_buffer_size(data: bytes, width: int, height: int) -> None:
    """
    Raw RGBA 바이트 길이 검증 (width * height * 4)

    Raises:
        InvalidImageError: 크기가 맞지 않는 경우
    """
    if width <= 0 or height <= 0:
        raise InvalidImageError(f"Buffer dimensions must be positive, got {width}x{height}")

    expected_size = width * height * 4
    if len(data) != expected_size:
        raise InvalidImageError(
            f"RGBA buffer size mismatch: expected {expected_size} bytes for {width}x{height}, got {len(data)}"
        )
