"""MediaPipe FaceMesh 기반 랜드마크 검출기"""

import time
from typing import List, Optional

import numpy as np

from ...models import FaceDetection, PixelBuffer, Point
from ...utils import get_config, get_logger
from ...utils.exceptions import DetectionError
from .base import LandmarkDetector

logger = get_logger(__name__)


def convert_face_mesh_results(results, width: int, height: int) -> List[FaceDetection]:
    """
    FaceMesh 결과(정규화 좌표)를 버퍼 픽셀 좌표의 FaceDetection 목록으로 변환

    Args:
        results: FaceMesh.process() 반환값 (multi_face_landmarks 속성)
        width, height: 입력 버퍼 크기

    Returns:
        얼굴별 FaceDetection (FaceMesh 는 박스를 제공하지 않으므로 box=None)
    """
    multi_face = getattr(results, 'multi_face_landmarks', None)
    if not multi_face:
        return []

    detections = []
    for face_landmarks in multi_face:
        points = [Point(float(lm.x) * width, float(lm.y) * height) for lm in face_landmarks.landmark]
        detections.append(FaceDetection(landmarks=points))
    return detections


class MediaPipeLandmarkDetector(LandmarkDetector):
    """
    MediaPipe FaceMesh 468(refine 시 478)점 검출기

    설정값은 인자로 넘기지 않으면 config.yaml 의 mediapipe.detection 섹션을 사용
    """

    def __init__(
        self,
        static_image_mode: Optional[bool] = None,
        max_num_faces: Optional[int] = None,
        refine_landmarks: Optional[bool] = None,
        min_detection_confidence: Optional[float] = None,
    ):
        config = get_config()

        def option(value, key, default):
            return value if value is not None else config.get(f'mediapipe.detection.{key}', default)

        # mediapipe 는 선택 의존성이므로 검출기 생성 시점에 import
        try:
            import mediapipe as mp
        except ImportError as e:
            raise DetectionError(
                "mediapipe is not installed. Install the 'detection' extra or pass --landmarks."
            ) from e

        try:
            self.face_mesh = mp.solutions.face_mesh.FaceMesh(
                static_image_mode=option(static_image_mode, 'static_image_mode', True),
                max_num_faces=option(max_num_faces, 'max_num_faces', 5),
                refine_landmarks=option(refine_landmarks, 'refine_landmarks', False),
                min_detection_confidence=option(min_detection_confidence, 'min_detection_confidence', 0.5),
            )
            logger.info("MediaPipe FaceMesh initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize MediaPipe FaceMesh: {e}")
            raise DetectionError(f"Failed to initialize MediaPipe FaceMesh: {e}") from e

    def detect(self, buffer: PixelBuffer) -> List[FaceDetection]:
        start_time = time.time()

        # FaceMesh 는 RGB 3채널 입력
        rgb = np.ascontiguousarray(buffer.pixels[..., :3])
        results = self.face_mesh.process(rgb)
        detections = convert_face_mesh_results(results, buffer.width, buffer.height)

        processing_time = (time.time() - start_time) * 1000
        if detections:
            logger.info(
                f"Detected {len(detections)} face(s) with {len(detections[0])} landmarks "
                f"({processing_time:.1f}ms)"
            )
        else:
            logger.debug(f"No face detected ({processing_time:.1f}ms)")
        return detections

    def close(self):
        if getattr(self, 'face_mesh', None) is not None:
            self.face_mesh.close()
            self.face_mesh = None
            logger.debug("MediaPipe FaceMesh closed")
