"""
Precomputed landmark loader.

Accepted JSON layouts:
    {"faces": [{"landmarks": [[x, y], ...], "box": {"x": .., "y": .., "width": .., "height": ..}}, ...]}
    {"landmarks": [...], "box": {...}}          (single face)
Points may also be objects with "x" and "y" keys. "box" is optional.
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Union

from ...models import BoundingBox, FaceDetection, Point
from ...utils import get_logger
from ...utils.exceptions import DetectionError
from .base import LandmarkDetector

logger = get_logger(__name__)


def _finite(value: Any, what: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise DetectionError(f"Non-finite {what} coordinate: {value!r}")
    return number


def _parse_point(raw: Any) -> Point:
    if isinstance(raw, dict):
        return Point(_finite(raw['x'], 'landmark'), _finite(raw['y'], 'landmark'))
    if isinstance(raw, (list, tuple)) and len(raw) >= 2:
        return Point(_finite(raw[0], 'landmark'), _finite(raw[1], 'landmark'))
    raise DetectionError(f"Invalid landmark point: {raw!r}")


def _parse_box(raw: Dict[str, Any]) -> BoundingBox:
    try:
        return BoundingBox(
            x_min=_finite(raw['x'], 'box'),
            y_min=_finite(raw['y'], 'box'),
            width=_finite(raw['width'], 'box'),
            height=_finite(raw['height'], 'box'),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DetectionError(f"Invalid bounding box: {raw!r}") from e


def parse_face(raw: Dict[str, Any]) -> FaceDetection:
    if not isinstance(raw, dict) or 'landmarks' not in raw:
        raise DetectionError("Face entry must be an object with a 'landmarks' list")

    try:
        points = [_parse_point(p) for p in raw['landmarks']]
    except (KeyError, TypeError, ValueError) as e:
        raise DetectionError(f"Invalid landmark list: {e}") from e

    box = _parse_box(raw['box']) if raw.get('box') is not None else None
    return FaceDetection(landmarks=points, box=box)


def parse_detections(data: Union[Dict[str, Any], List[Any]]) -> List[FaceDetection]:
    """JSON 객체를 FaceDetection 목록으로 변환"""
    if isinstance(data, dict) and 'faces' in data:
        faces = data['faces']
    elif isinstance(data, dict):
        faces = [data]
    elif isinstance(data, list):
        faces = data
    else:
        raise DetectionError(f"Unsupported landmark JSON root: {type(data).__name__}")

    return [parse_face(face) for face in faces]


def load_detections(path: Union[str, Path]) -> List[FaceDetection]:
    """파일에서 검출 결과 로드"""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise DetectionError(f"Failed to read landmark file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DetectionError(f"Invalid JSON in landmark file {path}: {e}") from e

    detections = parse_detections(data)
    logger.debug(f"Loaded {len(detections)} face(s) from {path}")
    return detections


class JsonLandmarkDetector(LandmarkDetector):
    """모델 대신 미리 계산된 랜드마크 파일을 반환하는 검출기"""

    def __init__(self, path: Union[str, Path]):
        self.detections = load_detections(path)

    def detect(self, buffer) -> List[FaceDetection]:
        return list(self.detections)
