"""데이터 모델 정의"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..utils.validators import validate_buffer_size, validate_rgba_array


class ScoreStatus(Enum):
    """Sub-score 산출 상태 (진단 플래그)"""
    COMPUTED = "computed"          # 정상 계산
    APPROXIMATED = "approximated"  # 일부 입력을 문서화된 대체값으로 보정
    FALLBACK = "fallback"          # 계산 불가, 중립 기본값 반환


@dataclass(frozen=True)
class Point:
    """버퍼 좌표계의 2D 랜드마크 포인트"""

    x: float
    y: float

    def to_list(self) -> List[float]:
        return [self.x, self.y]


@dataclass(frozen=True)
class BoundingBox:
    """축 정렬 바운딩 박스 (x_min, y_min, width, height)"""

    x_min: float
    y_min: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> Dict[str, float]:
        return {
            'x': round(self.x_min, 2),
            'y': round(self.y_min, 2),
            'width': round(self.width, 2),
            'height': round(self.height, 2),
        }


class PixelBuffer:
    """
    RGBA 픽셀 버퍼 (row-major, 좌상단 원점)

    분석 중 변경되지 않도록 내부 배열은 read-only로 고정한다.
    """

    def __init__(self, pixels: np.ndarray):
        validate_rgba_array(pixels)
        # 호출자 배열과 분리 후 쓰기 금지
        frozen = np.array(pixels, dtype=np.uint8, copy=True)
        frozen.setflags(write=False)
        self._pixels = frozen

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> 'PixelBuffer':
        """width * height * 4 길이의 RGBA 바이트열로 생성"""
        validate_buffer_size(data, width, height)
        pixels = np.frombuffer(bytes(data), dtype=np.uint8).reshape((height, width, 4))
        return cls(pixels)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"


@dataclass
class FaceDetection:
    """검출된 얼굴 하나: 순서가 고정된 랜드마크 + 선택적 바운딩 박스"""

    landmarks: Sequence[Point]
    box: Optional[BoundingBox] = None

    def __len__(self) -> int:
        return len(self.landmarks)


@dataclass
class SubScore:
    """0~100 정수 점수 + 산출 상태"""

    value: int
    status: ScoreStatus = ScoreStatus.COMPUTED
    detail: str = ""
    metrics: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        if not 0 <= self.value <= 100:
            raise ValueError(f"Sub-score must be within [0, 100], got {self.value}")

    @property
    def is_computed(self) -> bool:
        return self.status is ScoreStatus.COMPUTED

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'score': self.value,
            'status': self.status.value,
            'metrics': {k: round(v, 4) for k, v in self.metrics.items()},
        }
        if self.detail:
            result['detail'] = self.detail
        return result


@dataclass
class ScoreBundle:
    """4개 sub-score + 가중 평균 overall"""

    symmetry: SubScore
    proportion: SubScore
    structure: SubScore
    skin: SubScore
    overall: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'overall': self.overall,
            'symmetry': self.symmetry.to_dict(),
            'proportion': self.proportion.to_dict(),
            'structure': self.structure.to_dict(),
            'skin': self.skin.to_dict(),
        }


@dataclass
class AdviceItem:
    """임계값 비교로 선택된 추천 문구"""

    label: str
    favorable: bool
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'label': self.label,
            'favorable': self.favorable,
            'text': self.text,
        }


@dataclass
class AnalysisReport:
    """단일 얼굴 분석 결과 (통합)"""

    scores: ScoreBundle
    advice: List[AdviceItem]
    landmark_count: int = 0
    face_box: Optional[BoundingBox] = None
    processing_time: float = 0.0  # ms

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scores': self.scores.to_dict(),
            'advice': [item.to_dict() for item in self.advice],
            'face': {
                'landmark_count': self.landmark_count,
                'box': self.face_box.to_dict() if self.face_box else None,
            },
            'processing_time_ms': round(self.processing_time, 2),
        }
