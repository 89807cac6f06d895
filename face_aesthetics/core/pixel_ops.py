"""픽셀 버퍼 연산 (휘도 변환, 영역 추출, 리샘플링)"""

from typing import Tuple

import cv2
import numpy as np

from ..models import PixelBuffer
from .constants import LUMINANCE_WEIGHTS


def luminance(rgba: np.ndarray) -> np.ndarray:
    """
    RGBA 배열의 지각 휘도 근사치 (0.21 R + 0.72 G + 0.07 B)

    CIE 휘도가 아닌 고정 가중치를 사용한다.
    """
    wr, wg, wb = LUMINANCE_WEIGHTS
    rgb = rgba[..., :3].astype(np.float64)
    return wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]


def crop(buffer: PixelBuffer, x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
    """
    [x0, x1) x [y0, y1) 영역 추출, 버퍼 경계로 clamp

    범위가 비면 (0, 0, 4) 형태의 빈 배열을 반환한다.
    """
    x0 = int(np.clip(x0, 0, buffer.width))
    x1 = int(np.clip(x1, 0, buffer.width))
    y0 = int(np.clip(y0, 0, buffer.height))
    y1 = int(np.clip(y1, 0, buffer.height))

    if x1 <= x0 or y1 <= y0:
        return np.zeros((0, 0, 4), dtype=np.uint8)
    return buffer.pixels[y0:y1, x0:x1]


def fit_size(width: int, height: int, max_width: int, max_height: int) -> Tuple[int, int]:
    """종횡비를 유지하며 (max_width, max_height) 안에 들어가는 크기 (확대 없음)"""
    scale = min(max_width / width, max_height / height, 1.0)
    return max(1, int(round(width * scale))), max(1, int(round(height * scale)))


def resample(region: np.ndarray, width: int, height: int) -> np.ndarray:
    """영역을 (width, height) 로 리샘플링 (축소 시 INTER_AREA)"""
    if region.shape[1] == width and region.shape[0] == height:
        return region
    # read-only 뷰는 OpenCV 로 넘기기 전에 연속 배열로 복사
    src = np.ascontiguousarray(region)
    return cv2.resize(src, (width, height), interpolation=cv2.INTER_AREA)
