"""점수 집계 및 추천 문구 테스트"""

import pytest

from face_aesthetics.core.advisor import (
    ADVICE_TABLE,
    aggregate,
    generate_advice,
    overall_score,
    render_advice_text,
)
from face_aesthetics.models import ScoreStatus, SubScore


def _bundle(symmetry=80, proportion=80, structure=80, skin=80):
    return aggregate(SubScore(symmetry), SubScore(proportion), SubScore(structure), SubScore(skin))


@pytest.mark.parametrize("scores, expected", [
    ((100, 100, 100, 100), 100),
    ((0, 0, 0, 0), 0),
    ((100, 100, 100, 65), 93),
    ((50, 50, 50, 50), 50),
    ((60, 40, 70, 90), 63),
])
def test_overall_weighted_mean(scores, expected):
    assert overall_score(*scores) == expected


def test_aggregate_keeps_sub_scores():
    skin = SubScore(30, status=ScoreStatus.FALLBACK, detail="no landmarks")
    bundle = aggregate(SubScore(90), SubScore(80), SubScore(70), skin)
    assert bundle.skin is skin
    assert bundle.overall == overall_score(90, 80, 70, 30)


def test_advice_order_is_fixed():
    labels = [item.label for item in generate_advice(_bundle())]
    assert labels == ['Skin', 'Symmetry', 'Structure', 'Proportions']


def test_all_favorable_at_high_scores():
    items = generate_advice(_bundle())
    assert all(item.favorable for item in items)
    assert [item.text for item in items] == [row[3] for row in ADVICE_TABLE]


@pytest.mark.parametrize("key, label, threshold", [
    ('skin', 'Skin', 60),
    ('symmetry', 'Symmetry', 60),
    ('structure', 'Structure', 55),
    ('proportion', 'Proportions', 60),
])
def test_threshold_boundary(key, label, threshold):
    """임계값과 같으면 favorable, 1점 낮으면 unfavorable"""
    at = {item.label: item for item in generate_advice(_bundle(**{key: threshold}))}
    below = {item.label: item for item in generate_advice(_bundle(**{key: threshold - 1}))}

    assert at[label].favorable
    assert not below[label].favorable
    assert at[label].text != below[label].text


def test_structure_54_is_unfavorable_but_57_is_not():
    items = {item.label: item for item in generate_advice(_bundle(structure=54))}
    assert items['Structure'].text.startswith('Consider posture')
    items = {item.label: item for item in generate_advice(_bundle(structure=57))}
    assert items['Structure'].text.startswith('Strong bone structure')


def test_render_advice_text_numbers_items():
    text = render_advice_text(generate_advice(_bundle(skin=10)))
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith('1. Skin: Start with a basic routine')
    assert lines[3].startswith('4. Proportions: Good proportions.')
    assert '<' not in text
