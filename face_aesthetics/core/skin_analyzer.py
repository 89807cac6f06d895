"""
Skin health analysis on a downsampled face region.

Three proxies are combined:
- sharpness: mean 4-neighbour luminance gradient (visible texture/blemish detail)
- redness: red/green channel balance
- texture: luminance variance (blotchiness)

These are heuristics over pixel statistics, not a clinical assessment.
"""
import math

import numpy as np

from ..models import FaceDetection, PixelBuffer, ScoreStatus, SubScore
from ..utils import get_logger
from .constants import (
    NEUTRAL_SCORE,
    SKIN_GRADIENT_DIVISOR,
    SKIN_MIN_REGION,
    SKIN_RED_RATIO_BASE,
    SKIN_RED_RATIO_RANGE,
    SKIN_REDNESS_WEIGHT,
    SKIN_SAMPLE_MAX_HEIGHT,
    SKIN_SAMPLE_MAX_WIDTH,
    SKIN_SHARPNESS_WEIGHT,
    SKIN_TEXTURE_WEIGHT,
    SKIN_VARIANCE_DIVISOR,
)
from .geometry import clamp, clamp_score, has_finite_coordinates
from .pixel_ops import crop, fit_size, luminance, resample

logger = get_logger(__name__)


def sharpness_score(lum: np.ndarray):
    """
    내부 픽셀(1픽셀 테두리 제외)의 4-이웃 휘도 차 평균 -> 0~100

    Returns:
        (score, avg_gradient), 내부 픽셀이 없으면 (None, None)
    """
    if lum.shape[0] < 3 or lum.shape[1] < 3:
        return None, None

    center = lum[1:-1, 1:-1]
    gradient = (
        np.abs(center - lum[1:-1, :-2])
        + np.abs(center - lum[1:-1, 2:])
        + np.abs(center - lum[:-2, 1:-1])
        + np.abs(center - lum[2:, 1:-1])
    )
    avg_grad = float(gradient.mean())
    return clamp_score((avg_grad / SKIN_GRADIENT_DIVISOR) * 100), avg_grad


def redness_score(sample: np.ndarray):
    """R/G 평균 비율 기반 홍조 점수. 비율 1.04 이하는 감점 없음, 1.54 이상에서 0"""
    r_avg = float(sample[..., 0].astype(np.float64).mean())
    g_avg = float(sample[..., 1].astype(np.float64).mean())
    red_ratio = r_avg / (g_avg + 1)
    penalty = clamp((red_ratio - SKIN_RED_RATIO_BASE) / SKIN_RED_RATIO_RANGE, 0, 1)
    return max(0.0, 100 - penalty * 100), red_ratio


def texture_score(lum: np.ndarray):
    """휘도 분산이 클수록 감점"""
    variance = float(lum.var())
    return clamp_score(100 - (variance / SKIN_VARIANCE_DIVISOR) * 100), variance


class SkinAnalyzer:
    """다운샘플된 얼굴 영역의 선명도/홍조/질감 점수"""

    def score(self, buffer: PixelBuffer, face: FaceDetection) -> SubScore:
        if len(face.landmarks) == 0:
            return self._fallback("no landmarks")
        if not has_finite_coordinates(face):
            return self._fallback("non-finite landmark coordinates")

        xs = np.array([p.x for p in face.landmarks], dtype=np.float64)
        ys = np.array([p.y for p in face.landmarks], dtype=np.float64)

        min_x = max(0, int(math.floor(xs.min())))
        max_x = min(buffer.width - 1, int(math.ceil(xs.max())))
        min_y = max(0, int(math.floor(ys.min())))
        max_y = min(buffer.height - 1, int(math.ceil(ys.max())))

        # 최소 40x40 영역 (버퍼 밖은 잘림)
        width = max(SKIN_MIN_REGION, max_x - min_x)
        height = max(SKIN_MIN_REGION, max_y - min_y)
        region = crop(buffer, min_x, min_y, min_x + width, min_y + height)
        if region.size == 0:
            return self._fallback("landmark region lies outside the image")

        sample_w, sample_h = fit_size(
            region.shape[1], region.shape[0], SKIN_SAMPLE_MAX_WIDTH, SKIN_SAMPLE_MAX_HEIGHT
        )
        sample = resample(region, sample_w, sample_h)
        lum = luminance(sample)

        status = ScoreStatus.COMPUTED
        detail = ""
        sharp, avg_grad = sharpness_score(lum)
        if sharp is None:
            sharp, avg_grad = 0, 0.0
            status = ScoreStatus.APPROXIMATED
            detail = f"sample {sample_w}x{sample_h} has no interior pixels, sharpness set to 0"
            logger.warning(f"Skin approximated: {detail}")

        red, red_ratio = redness_score(sample)
        texture, variance = texture_score(lum)

        value = clamp_score(
            sharp * SKIN_SHARPNESS_WEIGHT
            + red * SKIN_REDNESS_WEIGHT
            + texture * SKIN_TEXTURE_WEIGHT
        )
        logger.debug(
            f"Skin: sample={sample_w}x{sample_h} grad={avg_grad:.2f} red_ratio={red_ratio:.3f} "
            f"variance={variance:.1f} -> sharp={sharp} red={red:.1f} texture={texture} score={value}"
        )

        return SubScore(
            value=value,
            status=status,
            detail=detail,
            metrics={
                'sharpness_score': float(sharp),
                'redness_score': float(red),
                'texture_score': float(texture),
                'avg_gradient': avg_grad,
                'red_ratio': red_ratio,
                'luminance_variance': variance,
                'sample_width': float(sample_w),
                'sample_height': float(sample_h),
            },
        )

    @staticmethod
    def _fallback(reason: str) -> SubScore:
        logger.warning(f"Skin fallback to neutral score: {reason}")
        return SubScore(value=NEUTRAL_SCORE, status=ScoreStatus.FALLBACK, detail=reason)
