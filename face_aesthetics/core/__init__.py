"""
Core analysis engine package.
"""
# 검출기 어댑터는 core.detection 에서 직접 import (엔진은 검출 결과만 받음)

from .scoring_engine import ScoringEngine
from .symmetry_analyzer import SymmetryAnalyzer
from .proportion_analyzer import ProportionAnalyzer
from .structure_analyzer import StructureAnalyzer
from .skin_analyzer import SkinAnalyzer
from .advisor import aggregate, generate_advice, overall_score, render_advice_text
from .face_selector import select_primary_face

__all__ = [
    'ScoringEngine',
    'SymmetryAnalyzer', 'ProportionAnalyzer', 'StructureAnalyzer', 'SkinAnalyzer',
    'aggregate', 'generate_advice', 'overall_score', 'render_advice_text',
    'select_primary_face',
]
