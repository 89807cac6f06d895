"""
Data models for the face aesthetics scorer.
"""
from .score_models import (
    AdviceItem,
    AnalysisReport,
    BoundingBox,
    FaceDetection,
    PixelBuffer,
    Point,
    ScoreBundle,
    ScoreStatus,
    SubScore,
)

__all__ = [
    'AdviceItem', 'AnalysisReport', 'BoundingBox', 'FaceDetection',
    'PixelBuffer', 'Point', 'ScoreBundle', 'ScoreStatus', 'SubScore',
]
