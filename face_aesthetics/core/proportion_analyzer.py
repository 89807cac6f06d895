"""
Proportion analysis: face aspect ratio and inter-eye distance against fixed targets.
"""
from ..models import FaceDetection, ScoreStatus, SubScore
from ..utils import get_logger
from .constants import (
    NEUTRAL_SCORE,
    PROPORTION_BASE_WEIGHT,
    PROPORTION_EYE_TARGET,
    PROPORTION_EYE_WEIGHT,
    PROPORTION_FLOOR,
    PROPORTION_MIN_LANDMARKS,
    PROPORTION_TARGET_RATIO,
)
from .geometry import bounding_box, centroid, clamp, clamp_score, distance, has_finite_coordinates
from .landmark_lookup import resolve_group

logger = get_logger(__name__)


class ProportionAnalyzer:
    """
    비율 점수

    - 얼굴 세로/가로 비율 vs 1.62 (가중치 0.7)
    - 눈 중심 거리/얼굴 너비 vs 0.36 (가중치 0.3)
    - 최저점 10 (비율은 결격 사유로 보지 않음)
    """

    def score(self, face: FaceDetection) -> SubScore:
        landmarks = face.landmarks
        if len(landmarks) < PROPORTION_MIN_LANDMARKS:
            return self._fallback(
                f"only {len(landmarks)} landmarks (need {PROPORTION_MIN_LANDMARKS})"
            )
        if not has_finite_coordinates(face):
            return self._fallback("non-finite landmark coordinates")

        box = bounding_box(landmarks)
        if box.width <= 0 or box.height <= 0:
            return self._fallback(f"degenerate landmark extent {box.width:.1f}x{box.height:.1f}")

        ratio = box.height / box.width
        diff = abs(ratio - PROPORTION_TARGET_RATIO) / PROPORTION_TARGET_RATIO
        base_score = clamp(100 - diff * 100, 0, 100)
        metrics = {'aspect_ratio': ratio, 'base_score': base_score}

        left_idx = resolve_group(face, 'left_eye')
        right_idx = resolve_group(face, 'right_eye')
        if left_idx is None or right_idx is None:
            # 눈 인덱스가 없는 메쉬: 종횡비 항목만 사용
            value = clamp_score(base_score, PROPORTION_FLOOR, 100)
            logger.warning(
                f"Proportion: eye landmarks unavailable in {len(landmarks)}-point mesh, "
                f"using aspect ratio only (score={value})"
            )
            return SubScore(
                value=value,
                status=ScoreStatus.APPROXIMATED,
                detail="eye landmarks unavailable, aspect ratio only",
                metrics=metrics,
            )

        left_eye = centroid(landmarks, left_idx)
        right_eye = centroid(landmarks, right_idx)
        eye_to_width = distance(left_eye, right_eye) / box.width
        eye_diff = abs(eye_to_width - PROPORTION_EYE_TARGET) / PROPORTION_EYE_TARGET
        eye_score = clamp(100 - eye_diff * 100, 0, 100)

        combined = base_score * PROPORTION_BASE_WEIGHT + eye_score * PROPORTION_EYE_WEIGHT
        value = clamp_score(combined, PROPORTION_FLOOR, 100)

        metrics.update({'eye_to_width': eye_to_width, 'eye_score': eye_score})
        logger.debug(
            f"Proportion: ratio={ratio:.3f} eye_to_width={eye_to_width:.3f} "
            f"base={base_score:.1f} eye={eye_score:.1f} score={value}"
        )
        return SubScore(value=value, metrics=metrics)

    @staticmethod
    def _fallback(reason: str) -> SubScore:
        logger.warning(f"Proportion fallback to neutral score: {reason}")
        return SubScore(value=NEUTRAL_SCORE, status=ScoreStatus.FALLBACK, detail=reason)
