"""Landmark detector interface"""

from abc import ABC, abstractmethod
from typing import List

from ...models import FaceDetection, PixelBuffer


class LandmarkDetector(ABC):
    """픽셀 버퍼 -> 0개 이상의 FaceDetection (검출 모델은 블랙박스)"""

    @abstractmethod
    def detect(self, buffer: PixelBuffer) -> List[FaceDetection]:
        pass

    def close(self):
        """모델 리소스 해제 (필요한 구현만 override)"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
