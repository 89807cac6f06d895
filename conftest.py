"""
공용 테스트 fixture: 합성 랜드마크 메쉬와 픽셀 버퍼
"""
import numpy as np
import pytest

from face_aesthetics.models import FaceDetection, PixelBuffer, Point

MESH_SIZE = 468


def build_mesh(width=100.0, height=162.0, origin=(50.0, 20.0), count=MESH_SIZE):
    """
    합성 468점 메쉬

    - 0번/1번 포인트가 바운딩 박스 (origin ~ origin + (width, height)) 를 결정
    - 나머지 포인트는 박스 중앙
    - 눈 중심 거리 = 0.36 * width, 턱 너비 = 0.9 * width, 중안면 너비 = width
    """
    ox, oy = origin
    center = Point(ox + width / 2, oy + height / 2)
    points = [center] * count

    def put(index, x, y):
        if index < count:
            points[index] = Point(x, y)

    put(0, ox, oy)
    put(1, ox + width, oy + height)

    eye_y = oy + height * 0.37
    for i in (33, 133, 159, 145):
        put(i, ox + width * 0.32, eye_y)
    for i in (362, 263, 386, 374):
        put(i, ox + width * 0.68, eye_y)

    put(234, ox + width * 0.05, oy + height * 0.55)
    put(454, ox + width * 0.95, oy + height * 0.55)
    put(98, ox, oy + height * 0.6)
    put(328, ox + width, oy + height * 0.6)
    put(152, ox + width / 2, oy + height)
    return points


@pytest.fixture
def golden_face():
    """비율 1.62, 눈 거리 0.36, 턱/중안면 0.9 를 정확히 만족하는 얼굴"""
    return FaceDetection(landmarks=build_mesh())


@pytest.fixture
def make_face():
    def _make(**kwargs):
        box = kwargs.pop('box', None)
        return FaceDetection(landmarks=build_mesh(**kwargs), box=box)
    return _make


@pytest.fixture
def make_buffer():
    """단색 RGBA 버퍼 생성기"""
    def _make(width=300, height=300, color=(128, 128, 128)):
        pixels = np.zeros((height, width, 4), dtype=np.uint8)
        pixels[..., :3] = color
        pixels[..., 3] = 255
        return PixelBuffer(pixels)
    return _make


@pytest.fixture
def uniform_buffer(make_buffer):
    return make_buffer()
