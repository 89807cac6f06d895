"""Primary face selection among multiple detections"""

from typing import Sequence

from ..models import FaceDetection
from ..utils import get_logger
from ..utils.exceptions import NoFaceDetectedError
from .geometry import face_box

logger = get_logger(__name__)


def detection_area(face: FaceDetection) -> float:
    """박스가 있으면 박스 넓이, 없으면 랜드마크 범위 넓이"""
    if face.box is None and len(face.landmarks) == 0:
        return 0.0
    return face_box(face).area


def select_primary_face(detections: Sequence[FaceDetection]) -> FaceDetection:
    """
    가장 큰 얼굴 하나 선택 (동률이면 먼저 나온 얼굴)

    Raises:
        NoFaceDetectedError: 검출 결과가 비어있는 경우
    """
    if not detections:
        raise NoFaceDetectedError("No face detected. Use a frontal, clear photo in good light.")

    best = detections[0]
    best_area = detection_area(best)
    for face in detections[1:]:
        area = detection_area(face)
        if area > best_area:
            best, best_area = face, area

    if len(detections) > 1:
        logger.info(f"Selected largest of {len(detections)} faces (area={best_area:.1f})")
    return best
