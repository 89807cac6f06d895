"""
Symmetry analysis: mirrored-luminance comparison over a padded face region.
"""
import math

import numpy as np

from ..models import FaceDetection, PixelBuffer, ScoreStatus, SubScore
from ..utils import get_logger
from .constants import NEUTRAL_SCORE, SYMMETRY_MAX_DIFF, SYMMETRY_PADDING
from .geometry import clamp_score, face_box, is_finite_box
from .pixel_ops import crop, luminance

logger = get_logger(__name__)


class SymmetryAnalyzer:
    """좌우 반전 휘도 비교 기반 대칭 점수"""

    def score(self, buffer: PixelBuffer, face: FaceDetection) -> SubScore:
        """
        Scores left/right mirror similarity of the padded face region.

        The face box (detector box, else landmark extent) is padded by 10% on
        each side and clamped to the buffer. Every column in the left half is
        compared with its mirrored column; an average luminance mismatch of
        SYMMETRY_MAX_DIFF or more scores 0, a perfect mirror scores 100.
        """
        if face.box is None and len(face.landmarks) == 0:
            return self._fallback("no bounding box and no landmarks")
        box = face_box(face)
        if not is_finite_box(box):
            return self._fallback("non-finite face box coordinates")
        if box.width <= 0 or box.height <= 0:
            return self._fallback(f"degenerate face box {box.width:.1f}x{box.height:.1f}")

        # 패딩 영역: 시작점은 0 으로, 크기는 버퍼 끝까지로 clamp
        sx = max(0.0, box.x_min - box.width * SYMMETRY_PADDING)
        sy = max(0.0, box.y_min - box.height * SYMMETRY_PADDING)
        sw = min(buffer.width - sx, box.width * (1 + SYMMETRY_PADDING * 2))
        sh = min(buffer.height - sy, box.height * (1 + SYMMETRY_PADDING * 2))

        x0, y0 = int(math.floor(sx)), int(math.floor(sy))
        region = crop(buffer, x0, y0, x0 + int(math.floor(sw)), y0 + int(math.floor(sh)))

        height, width = region.shape[:2]
        half = width // 2
        if height == 0 or half == 0:
            return self._fallback(f"padded region {width}x{height} has no mirror pairs")

        lum = luminance(region)
        left = lum[:, :half]
        right = lum[:, ::-1][:, :half]
        avg_diff = float(np.mean(np.abs(left - right)))

        value = clamp_score(100 - (avg_diff / SYMMETRY_MAX_DIFF) * 100)
        logger.debug(f"Symmetry: region={width}x{height} avg_diff={avg_diff:.3f} score={value}")

        return SubScore(
            value=value,
            metrics={
                'avg_luminance_diff': avg_diff,
                'region_width': float(width),
                'region_height': float(height),
            },
        )

    @staticmethod
    def _fallback(reason: str) -> SubScore:
        logger.warning(f"Symmetry fallback to neutral score: {reason}")
        return SubScore(value=NEUTRAL_SCORE, status=ScoreStatus.FALLBACK, detail=reason)
