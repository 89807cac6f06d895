# -*- coding: utf-8 -*-
"""
Image loading and resizing utilities (file -> RGBA PixelBuffer)
"""

from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from ..models import PixelBuffer
from .exceptions import InvalidImageError
from .logging_config import get_logger

logger = get_logger(__name__)


def load_image(path: Union[str, Path]) -> PixelBuffer:
    """
    이미지 파일을 RGBA PixelBuffer 로 로드

    Args:
        path: 이미지 경로 (PNG, JPEG 등 Pillow 지원 포맷)

    Returns:
        PixelBuffer

    Note:
        - EXIF 회전 정보를 적용해 세로 사진이 눕지 않도록 함
        - 알파 채널이 없으면 255 로 채움
    """
    path = Path(path)
    if not path.exists():
        raise InvalidImageError(f"Image not found: {path}")

    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            rgba = np.asarray(img.convert('RGBA'), dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Failed to load image {path}: {e}") from e

    logger.debug(f"Loaded {path.name}: {rgba.shape[1]}x{rgba.shape[0]}")
    return PixelBuffer(rgba)


def fit_within(buffer: PixelBuffer, max_width: int = 480, max_height: int = 640) -> PixelBuffer:
    """
    종횡비를 유지하며 (max_width, max_height) 안으로 축소 (확대는 하지 않음)

    점수는 해상도에 따라 달라지므로 업로드 이미지를 동일한 작업 크기로 맞춘다.
    """
    ratio = min(max_width / buffer.width, max_height / buffer.height, 1.0)
    if ratio >= 1.0:
        return buffer

    new_w = max(1, int(round(buffer.width * ratio)))
    new_h = max(1, int(round(buffer.height * ratio)))
    resized = cv2.resize(
        np.ascontiguousarray(buffer.pixels), (new_w, new_h), interpolation=cv2.INTER_AREA
    )
    logger.debug(f"Resized {buffer.width}x{buffer.height} -> {new_w}x{new_h}")
    return PixelBuffer(resized)
