"""얼굴 기하학 계산 유틸리티"""

import math
from typing import Sequence

import numpy as np

from ..models import BoundingBox, FaceDetection, Point
from ..utils.exceptions import LandmarkIndexError


def bounding_box(points: Sequence[Point]) -> BoundingBox:
    """
    포인트 집합의 축 정렬 바운딩 박스

    Args:
        points: 비어있지 않은 포인트 시퀀스

    Returns:
        BoundingBox (x_min, y_min, width, height)
    """
    if len(points) == 0:
        raise ValueError("bounding_box requires at least one point")

    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    x_min, y_min = coords.min(axis=0)
    x_max, y_max = coords.max(axis=0)

    return BoundingBox(
        x_min=float(x_min),
        y_min=float(y_min),
        width=float(x_max - x_min),
        height=float(y_max - y_min),
    )


def has_finite_coordinates(face: FaceDetection) -> bool:
    """모든 랜드마크 좌표가 유한한지 (NaN / inf 없음)"""
    return all(math.isfinite(p.x) and math.isfinite(p.y) for p in face.landmarks)


def is_finite_box(box: BoundingBox) -> bool:
    return all(math.isfinite(v) for v in (box.x_min, box.y_min, box.width, box.height))


def face_box(face: FaceDetection) -> BoundingBox:
    """검출 박스가 있으면 그대로, 없으면 랜드마크 범위로 계산"""
    if face.box is not None:
        return face.box
    return bounding_box(face.landmarks)


def centroid(points: Sequence[Point], indices: Sequence[int]) -> Point:
    """
    지정한 인덱스 포인트들의 산술 평균

    Raises:
        LandmarkIndexError: 인덱스가 범위를 벗어난 경우
    """
    if len(indices) == 0:
        raise ValueError("centroid requires at least one index")

    for index in indices:
        if not 0 <= index < len(points):
            raise LandmarkIndexError(
                f"Landmark index {index} out of range for mesh of {len(points)} points"
            )

    sx = sum(points[i].x for i in indices)
    sy = sum(points[i].y for i in indices)
    return Point(sx / len(indices), sy / len(indices))


def distance(a: Point, b: Point) -> float:
    """두 포인트 간 유클리드 거리"""
    return math.hypot(a.x - b.x, a.y - b.y)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """0.5 는 항상 올림 (banker's rounding 사용 안 함)"""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """반올림 후 [low, high] 범위로 제한"""
    return int(clamp(round_half_up(value), low, high))
