"""
Aggregation of sub-scores into an overall score and threshold-driven advice.
"""
from typing import List

from ..models import AdviceItem, ScoreBundle, SubScore
from .constants import ADVICE_THRESHOLDS, OVERALL_WEIGHTS
from .geometry import clamp_score


# (label, score key, unfavorable text, favorable text) - 출력 순서 고정
ADVICE_TABLE = [
    (
        'Skin', 'skin',
        'Start with a basic routine: gentle cleanser, moisturizer with SPF, and a targeted '
        'acne/spot treatment. Consider a dermatologist if severe.',
        'Looks healthy. Maintain routine: cleanse, moisturize, sunscreen. Add exfoliation '
        '1-2x weekly if needed.',
    ),
    (
        'Symmetry', 'symmetry',
        'Natural asymmetry is normal. Non-invasive improvements: hairstyle, facial hair '
        'trimming, contouring with makeup. For large concerns, consult specialists.',
        'Symmetry is good. Use grooming to highlight strengths (jawline, cheekbones).',
    ),
    (
        'Structure', 'structure',
        'Consider posture & fat-loss to enhance jawline. Targeted jawline exercises and '
        'strength training can help; long-term: weight loss reduces facial fat.',
        'Strong bone structure. Emphasize with hair & beard styles.',
    ),
    (
        'Proportions', 'proportion',
        'Subtle changes (haircut, glasses/frame choice) can improve perceived proportions. '
        'Work on hairstyle that elongates or broadens face depending on goal.',
        'Good proportions. Keep grooming consistent. Consider style upgrades (fits, collars) '
        'to match face shape.',
    ),
]


def overall_score(symmetry: int, proportion: int, structure: int, skin: int) -> int:
    """가중 평균 (0.35 / 0.25 / 0.2 / 0.2), 반올림 후 [0, 100]"""
    weighted = (
        symmetry * OVERALL_WEIGHTS['symmetry']
        + proportion * OVERALL_WEIGHTS['proportion']
        + structure * OVERALL_WEIGHTS['structure']
        + skin * OVERALL_WEIGHTS['skin']
    )
    return clamp_score(weighted)


def aggregate(symmetry: SubScore, proportion: SubScore, structure: SubScore, skin: SubScore) -> ScoreBundle:
    return ScoreBundle(
        symmetry=symmetry,
        proportion=proportion,
        structure=structure,
        skin=skin,
        overall=overall_score(symmetry.value, proportion.value, structure.value, skin.value),
    )


def generate_advice(scores: ScoreBundle) -> List[AdviceItem]:
    """
    Picks one of two fixed prose variants per sub-score.

    A score below its threshold selects the unfavorable text; a score equal to
    the threshold is favorable. Order is always Skin, Symmetry, Structure,
    Proportions.
    """
    items = []
    for label, key, unfavorable, favorable in ADVICE_TABLE:
        value = getattr(scores, key).value
        is_favorable = value >= ADVICE_THRESHOLDS[key]
        items.append(AdviceItem(
            label=label,
            favorable=is_favorable,
            text=favorable if is_favorable else unfavorable,
        ))
    return items


def render_advice_text(items: List[AdviceItem]) -> str:
    """번호 매긴 plain-text 목록 (마크업은 호출자 책임)"""
    return "\n".join(f"{i}. {item.label}: {item.text}" for i, item in enumerate(items, 1))
