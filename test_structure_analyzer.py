"""StructureAnalyzer 테스트"""

from conftest import build_mesh
from face_aesthetics.core.structure_analyzer import StructureAnalyzer
from face_aesthetics.models import FaceDetection, Point, ScoreStatus


def test_target_ratio_scores_100(golden_face):
    result = StructureAnalyzer().score(golden_face)
    assert result.value == 100
    assert result.status is ScoreStatus.COMPUTED
    assert result.metrics['jaw_width'] == 90.0
    assert result.metrics['midface_width'] == 100.0


def test_short_mesh_uses_documented_fallbacks(make_face):
    """
    300점 메쉬: 454 -> 마지막 인덱스, 328 없음 -> 중안면 = 턱 * 0.9
    턱/중안면 = 1/0.9 이므로 100 - (0.2346 * 160) = 62.47
    """
    result = StructureAnalyzer().score(make_face(count=300))

    assert result.value == 62
    assert result.status is ScoreStatus.APPROXIMATED
    assert 'jaw_right -> index 299' in result.detail
    assert 'midface width estimated' in result.detail


def test_no_landmarks_falls_back():
    result = StructureAnalyzer().score(FaceDetection(landmarks=[]))
    assert result.value == 50
    assert result.status is ScoreStatus.FALLBACK


def test_zero_midface_width_falls_back():
    points = build_mesh()
    points[328] = Point(points[98].x, points[328].y)

    result = StructureAnalyzer().score(FaceDetection(landmarks=points))

    assert result.value == 50
    assert result.status is ScoreStatus.FALLBACK


def test_score_floor_is_5():
    points = build_mesh()
    points[234] = Point(-150, points[234].y)
    points[454] = Point(250, points[454].y)

    result = StructureAnalyzer().score(FaceDetection(landmarks=points))

    assert result.metrics['jaw_to_midface'] == 4.0
    assert result.value == 5


def test_jaw_width_is_order_independent():
    points = build_mesh()
    points[234], points[454] = points[454], points[234]
    assert StructureAnalyzer().score(FaceDetection(landmarks=points)).value == 100


def test_non_finite_jaw_corner_falls_back():
    points = build_mesh()
    points[454] = Point(float('inf'), points[454].y)
    result = StructureAnalyzer().score(FaceDetection(landmarks=points))
    assert result.value == 50
    assert result.status is ScoreStatus.FALLBACK
