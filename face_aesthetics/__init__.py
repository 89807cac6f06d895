"""
Face Aesthetics Scorer
Landmark + pixel based facial metric scoring (symmetry, proportion, structure, skin)
"""

__version__ = "0.1.0"

from .core import ScoringEngine, select_primary_face
from .models import (
    AnalysisReport,
    BoundingBox,
    FaceDetection,
    PixelBuffer,
    Point,
    ScoreStatus,
    SubScore,
)

__all__ = [
    'ScoringEngine', 'select_primary_face',
    'AnalysisReport', 'BoundingBox', 'FaceDetection', 'PixelBuffer',
    'Point', 'ScoreStatus', 'SubScore',
]
