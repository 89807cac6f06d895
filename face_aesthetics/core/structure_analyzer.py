"""
Structure analysis: jaw width relative to midface width.
"""
from typing import List

from ..models import FaceDetection, ScoreStatus, SubScore
from ..utils import get_logger
from .constants import (
    NAMED_LANDMARKS,
    NEUTRAL_SCORE,
    STRUCTURE_FLOOR,
    STRUCTURE_MIDFACE_FALLBACK_FACTOR,
    STRUCTURE_PENALTY,
    STRUCTURE_TARGET_RATIO,
)
from .geometry import clamp_score, has_finite_coordinates
from .landmark_lookup import has_landmark, resolve

logger = get_logger(__name__)


class StructureAnalyzer:
    """턱 너비 / 중안면 너비 비율 점수 (목표 0.9, 최저점 5)"""

    def score(self, face: FaceDetection) -> SubScore:
        if len(face.landmarks) == 0:
            return self._fallback("no landmarks")
        if not has_finite_coordinates(face):
            return self._fallback("non-finite landmark coordinates")

        approximations: List[str] = []

        # 턱 끝은 비율 계산에 쓰이지 않지만 메쉬 호환성 진단을 위해 조회
        chin = resolve(face, 'chin_tip')
        jaw_left = resolve(face, 'jaw_left')
        jaw_right = resolve(face, 'jaw_right')
        for resolution in (chin, jaw_left, jaw_right):
            if resolution.used_fallback:
                approximations.append(f"{resolution.name} -> index {resolution.index}")

        jaw_width = abs(jaw_right.point.x - jaw_left.point.x)

        mid_left = NAMED_LANDMARKS['midface_left']
        mid_right = NAMED_LANDMARKS['midface_right']
        if has_landmark(face, mid_left) and has_landmark(face, mid_right):
            midface_width = abs(face.landmarks[mid_left].x - face.landmarks[mid_right].x)
        else:
            midface_width = jaw_width * STRUCTURE_MIDFACE_FALLBACK_FACTOR
            approximations.append("midface width estimated from jaw width")

        if midface_width <= 0:
            return self._fallback(f"zero midface width (jaw width {jaw_width:.1f})")

        ratio = jaw_width / midface_width
        diff = abs(ratio - STRUCTURE_TARGET_RATIO) / STRUCTURE_TARGET_RATIO
        value = clamp_score(100 - diff * STRUCTURE_PENALTY, STRUCTURE_FLOOR, 100)

        metrics = {
            'jaw_width': jaw_width,
            'midface_width': midface_width,
            'jaw_to_midface': ratio,
        }
        logger.debug(f"Structure: jaw={jaw_width:.1f} midface={midface_width:.1f} ratio={ratio:.3f} score={value}")

        if approximations:
            detail = "; ".join(approximations)
            logger.warning(f"Structure approximated: {detail}")
            return SubScore(value=value, status=ScoreStatus.APPROXIMATED, detail=detail, metrics=metrics)

        return SubScore(value=value, metrics=metrics)

    @staticmethod
    def _fallback(reason: str) -> SubScore:
        logger.warning(f"Structure fallback to neutral score: {reason}")
        return SubScore(value=NEUTRAL_SCORE, status=ScoreStatus.FALLBACK, detail=reason)
