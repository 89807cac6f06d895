"""SymmetryAnalyzer 테스트"""

import numpy as np

from conftest import build_mesh
from face_aesthetics.core.constants import SYMMETRY_MAX_DIFF, SYMMETRY_PADDING
from face_aesthetics.core.symmetry_analyzer import SymmetryAnalyzer
from face_aesthetics.models import BoundingBox, FaceDetection, PixelBuffer, Point, ScoreStatus

FULL_FRAME = BoundingBox(0, 0, 200, 300)


def _split_buffer(left_value, right_value, width=200, height=300):
    pixels = np.full((height, width, 4), 255, dtype=np.uint8)
    pixels[:, : width // 2, :3] = left_value
    pixels[:, width // 2:, :3] = right_value
    return PixelBuffer(pixels)


def test_constants_are_preserved():
    assert SYMMETRY_PADDING == 0.1
    assert SYMMETRY_MAX_DIFF == 60


def test_perfect_mirror_scores_100():
    rng = np.random.default_rng(7)
    half = rng.integers(0, 256, size=(300, 100, 4), dtype=np.uint8)
    mirrored = np.concatenate([half, half[:, ::-1]], axis=1)
    buffer = PixelBuffer(mirrored)

    result = SymmetryAnalyzer().score(buffer, FaceDetection(landmarks=[], box=FULL_FRAME))

    assert result.value == 100
    assert result.status is ScoreStatus.COMPUTED
    assert result.metrics['avg_luminance_diff'] == 0.0


def test_inverted_halves_clamp_to_zero():
    buffer = _split_buffer(0, 255)
    result = SymmetryAnalyzer().score(buffer, FaceDetection(landmarks=[], box=FULL_FRAME))

    assert result.metrics['avg_luminance_diff'] > SYMMETRY_MAX_DIFF
    assert result.value == 0


def test_half_of_max_difference_scores_50():
    buffer = _split_buffer(0, 30)
    result = SymmetryAnalyzer().score(buffer, FaceDetection(landmarks=[], box=FULL_FRAME))
    assert result.value == 50


def test_uses_landmark_extent_without_box(uniform_buffer, golden_face):
    result = SymmetryAnalyzer().score(uniform_buffer, golden_face)
    assert result.value == 100
    # 100x162 박스 + 10% 패딩 = 120x194 영역
    assert result.metrics['region_width'] == 120
    assert result.metrics['region_height'] == 194


def test_padding_is_clamped_at_buffer_edges(make_buffer):
    """얼굴이 프레임 끝에 붙어 있어도 wrap 이나 에러 없이 clamp"""
    buffer = make_buffer(width=200, height=300)
    face = FaceDetection(landmarks=[], box=BoundingBox(150, 250, 60, 60))

    result = SymmetryAnalyzer().score(buffer, face)

    assert result.status is ScoreStatus.COMPUTED
    assert result.metrics['region_width'] == 200 - 144
    assert result.metrics['region_height'] == 300 - 244
    assert result.value == 100


def test_degenerate_box_falls_back(uniform_buffer):
    face = FaceDetection(landmarks=[], box=BoundingBox(10, 10, 0, 50))
    result = SymmetryAnalyzer().score(uniform_buffer, face)
    assert result.value == 50
    assert result.status is ScoreStatus.FALLBACK


def test_box_outside_buffer_falls_back(make_buffer):
    buffer = make_buffer(width=200, height=200)
    face = FaceDetection(landmarks=[], box=BoundingBox(500, 500, 80, 80))
    result = SymmetryAnalyzer().score(buffer, face)
    assert result.status is ScoreStatus.FALLBACK


def test_empty_face_falls_back(uniform_buffer):
    result = SymmetryAnalyzer().score(uniform_buffer, FaceDetection(landmarks=[]))
    assert result.status is ScoreStatus.FALLBACK
    assert result.value == 50


def test_nan_landmark_extent_falls_back(uniform_buffer):
    points = build_mesh()
    points[10] = Point(float('nan'), 50)
    result = SymmetryAnalyzer().score(uniform_buffer, FaceDetection(landmarks=points))
    assert result.value == 50
    assert result.status is ScoreStatus.FALLBACK
