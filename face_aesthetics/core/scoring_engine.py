"""
Facial Metric Scoring Engine
대칭 / 비율 / 구조 / 피부 분석기를 묶어 점수 번들과 추천 문구를 생성
"""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from ..models import AnalysisReport, FaceDetection, PixelBuffer
from ..utils import get_logger
from .advisor import aggregate, generate_advice
from .face_selector import select_primary_face
from .geometry import face_box
from .proportion_analyzer import ProportionAnalyzer
from .skin_analyzer import SkinAnalyzer
from .structure_analyzer import StructureAnalyzer
from .symmetry_analyzer import SymmetryAnalyzer

logger = get_logger(__name__)


class ScoringEngine:
    """
    Stateless scoring engine.

    Each analyzer is a pure function of (buffer, face); none depends on
    another's output, so they may run on a thread pool. Results are identical
    either way.

    Usage:
        engine = ScoringEngine()
        report = engine.analyze(buffer, face)
        print(report.scores.overall)
    """

    def __init__(self, parallel: bool = False, max_workers: int = 4):
        self.parallel = parallel
        self.max_workers = max_workers
        self.symmetry_analyzer = SymmetryAnalyzer()
        self.proportion_analyzer = ProportionAnalyzer()
        self.structure_analyzer = StructureAnalyzer()
        self.skin_analyzer = SkinAnalyzer()

    def analyze(self, buffer: PixelBuffer, face: FaceDetection) -> AnalysisReport:
        """
        단일 얼굴 점수 계산

        Args:
            buffer: RGBA 픽셀 버퍼
            face: 선택된 얼굴 (랜드마크 + 선택적 박스)

        Returns:
            AnalysisReport (점수 번들 + 추천 문구)
        """
        start_time = time.time()

        if self.parallel:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                symmetry = executor.submit(self.symmetry_analyzer.score, buffer, face)
                proportion = executor.submit(self.proportion_analyzer.score, face)
                structure = executor.submit(self.structure_analyzer.score, face)
                skin = executor.submit(self.skin_analyzer.score, buffer, face)
                scores = aggregate(symmetry.result(), proportion.result(), structure.result(), skin.result())
        else:
            scores = aggregate(
                self.symmetry_analyzer.score(buffer, face),
                self.proportion_analyzer.score(face),
                self.structure_analyzer.score(face),
                self.skin_analyzer.score(buffer, face),
            )

        advice = generate_advice(scores)
        processing_time = (time.time() - start_time) * 1000

        has_extent = face.box is not None or len(face.landmarks) > 0
        report = AnalysisReport(
            scores=scores,
            advice=advice,
            landmark_count=len(face.landmarks),
            face_box=face_box(face) if has_extent else None,
            processing_time=processing_time,
        )

        logger.info(
            f"Scored face: overall={scores.overall} symmetry={scores.symmetry.value} "
            f"proportion={scores.proportion.value} structure={scores.structure.value} "
            f"skin={scores.skin.value} ({processing_time:.2f}ms)"
        )
        return report

    def analyze_detections(self, buffer: PixelBuffer, detections: Sequence[FaceDetection]) -> AnalysisReport:
        """가장 큰 얼굴을 골라 분석 (검출 없으면 NoFaceDetectedError)"""
        return self.analyze(buffer, select_primary_face(detections))
