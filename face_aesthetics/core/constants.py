"""얼굴 랜드마크 인덱스 및 점수 산출 상수 정의

수치 상수는 기존 점수와의 호환을 위해 그대로 유지해야 한다.
나눗셈 계수(60, 18, 900, 160, 0.5)는 경험적으로 조정된 값이다.
"""

from typing import Dict, List, Tuple

# MediaPipe FaceMesh 468점 토폴로지 기준 단일 포인트
NAMED_LANDMARKS: Dict[str, int] = {
    'chin_tip': 152,           # 턱 끝
    'jaw_left': 234,           # 왼쪽 턱 모서리
    'jaw_right': 454,          # 오른쪽 턱 모서리
    'midface_left': 98,        # 중안면 좌측
    'midface_right': 328,      # 중안면 우측
}

# 눈 중심 계산용 포인트 묶음 (눈꼬리 + 눈꺼풀)
LANDMARK_GROUPS: Dict[str, List[int]] = {
    'left_eye': [33, 133, 159, 145],
    'right_eye': [362, 263, 386, 374],
}

# 짧은 메쉬 변형에서 기본 인덱스가 없을 때 사용하는 대체 위치
# 'middle' = len(mesh) // 2, 'first' = 0, 'last' = len(mesh) - 1
LANDMARK_FALLBACKS: Dict[str, str] = {
    'chin_tip': 'middle',
    'jaw_left': 'first',
    'jaw_right': 'last',
}

# 휘도 가중치 (R, G, B)
LUMINANCE_WEIGHTS: Tuple[float, float, float] = (0.21, 0.72, 0.07)

# 모든 sub-score 의 중립 기본값
NEUTRAL_SCORE = 50

# Symmetry
SYMMETRY_PADDING = 0.1
SYMMETRY_MAX_DIFF = 60.0

# Proportion
PROPORTION_MIN_LANDMARKS = 10
PROPORTION_TARGET_RATIO = 1.62
PROPORTION_EYE_TARGET = 0.36
PROPORTION_BASE_WEIGHT = 0.7
PROPORTION_EYE_WEIGHT = 0.3
PROPORTION_FLOOR = 10

# Structure
STRUCTURE_TARGET_RATIO = 0.9
STRUCTURE_MIDFACE_FALLBACK_FACTOR = 0.9
STRUCTURE_PENALTY = 160.0
STRUCTURE_FLOOR = 5

# Skin
SKIN_MIN_REGION = 40
SKIN_SAMPLE_MAX_WIDTH = 120
SKIN_SAMPLE_MAX_HEIGHT = 160
SKIN_GRADIENT_DIVISOR = 18.0
SKIN_RED_RATIO_BASE = 1.04
SKIN_RED_RATIO_RANGE = 0.5
SKIN_VARIANCE_DIVISOR = 900.0
SKIN_SHARPNESS_WEIGHT = 0.35
SKIN_REDNESS_WEIGHT = 0.2
SKIN_TEXTURE_WEIGHT = 0.45

# Aggregate
OVERALL_WEIGHTS: Dict[str, float] = {
    'symmetry': 0.35,
    'proportion': 0.25,
    'structure': 0.2,
    'skin': 0.2,
}

# Advice (score < threshold 이면 unfavorable)
ADVICE_THRESHOLDS: Dict[str, int] = {
    'skin': 60,
    'symmetry': 60,
    'structure': 55,
    'proportion': 60,
}
