"""
Named landmark lookup with explicit capability checks.

Mesh variants from different detector versions expose different landmark
counts, so every indexed access goes through here and reports whether a
documented fallback index had to be used.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..models import FaceDetection, Point
from .constants import LANDMARK_FALLBACKS, LANDMARK_GROUPS, NAMED_LANDMARKS


@dataclass(frozen=True)
class LandmarkResolution:
    """이름 기반 조회 결과"""

    name: str
    point: Optional[Point]
    index: Optional[int]
    used_fallback: bool = False

    @property
    def found(self) -> bool:
        return self.point is not None


def has_landmark(face: FaceDetection, index: int) -> bool:
    """이 메쉬 변형이 index 를 제공하는지 확인"""
    return 0 <= index < len(face.landmarks)


def _fallback_index(face: FaceDetection, strategy: str) -> Optional[int]:
    count = len(face.landmarks)
    if count == 0:
        return None
    if strategy == 'middle':
        return count // 2
    if strategy == 'first':
        return 0
    if strategy == 'last':
        return count - 1
    raise ValueError(f"Unknown fallback strategy: {strategy}")


def resolve(face: FaceDetection, name: str, allow_fallback: bool = True) -> LandmarkResolution:
    """
    의미 라벨로 랜드마크 조회

    Args:
        face: 검출된 얼굴
        name: NAMED_LANDMARKS 의 키 (예: 'chin_tip')
        allow_fallback: 기본 인덱스가 없을 때 LANDMARK_FALLBACKS 사용 여부

    Returns:
        LandmarkResolution (찾지 못하면 point=None)
    """
    if name not in NAMED_LANDMARKS:
        raise KeyError(f"Unknown landmark name: {name}")

    index = NAMED_LANDMARKS[name]
    if has_landmark(face, index):
        return LandmarkResolution(name, face.landmarks[index], index)

    strategy = LANDMARK_FALLBACKS.get(name)
    if allow_fallback and strategy is not None:
        fallback = _fallback_index(face, strategy)
        if fallback is not None:
            return LandmarkResolution(name, face.landmarks[fallback], fallback, used_fallback=True)

    return LandmarkResolution(name, None, None)


def resolve_group(face: FaceDetection, name: str) -> Optional[List[int]]:
    """포인트 묶음 인덱스를 반환, 하나라도 없으면 None"""
    if name not in LANDMARK_GROUPS:
        raise KeyError(f"Unknown landmark group: {name}")

    indices = LANDMARK_GROUPS[name]
    if all(has_landmark(face, i) for i in indices):
        return list(indices)
    return None
