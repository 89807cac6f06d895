"""CLI 엔드투엔드 테스트 (MediaPipe 대신 --landmarks 사용)"""

import json
import logging
from pathlib import Path

import pytest
from PIL import Image

import face_aesthetics
from conftest import build_mesh
from face_aesthetics.cli import build_parser, main
from face_aesthetics.utils import load_config, reconfigure_logging


def _write_inputs(tmp_path, faces):
    image_path = tmp_path / "portrait.png"
    Image.new('RGB', (300, 300), (128, 128, 128)).save(image_path)
    landmarks_path = tmp_path / "landmarks.json"
    landmarks_path.write_text(json.dumps({'faces': faces}), encoding='utf-8')
    return image_path, landmarks_path


def test_parser_defaults():
    args = build_parser().parse_args(['a.jpg', 'b.jpg'])
    assert args.images == ['a.jpg', 'b.jpg']
    assert not args.parallel
    assert args.landmarks is None


def test_scores_image_with_precomputed_landmarks(tmp_path, capsys):
    face = {'landmarks': [p.to_list() for p in build_mesh()]}
    image_path, landmarks_path = _write_inputs(tmp_path, [face])
    output_path = tmp_path / "results.json"

    exit_code = main([str(image_path), '--landmarks', str(landmarks_path), '--output', str(output_path)])

    assert exit_code == 0
    stdout = capsys.readouterr().out
    assert 'Overall: 93' in stdout
    assert '1. Skin:' in stdout

    results = json.loads(output_path.read_text(encoding='utf-8'))
    assert results[0]['success'] is True
    assert results[0]['faces_detected'] == 1
    assert results[0]['scores']['overall'] == 93


def test_no_face_reports_failure(tmp_path, capsys):
    image_path, landmarks_path = _write_inputs(tmp_path, [])
    output_path = tmp_path / "results.json"

    exit_code = main([str(image_path), '--landmarks', str(landmarks_path), '-o', str(output_path)])

    assert exit_code == 1
    results = json.loads(output_path.read_text(encoding='utf-8'))
    assert results == [{'image_path': str(image_path), 'success': False, 'error': 'no face detected'}]


def test_missing_image_reports_failure(tmp_path):
    _, landmarks_path = _write_inputs(tmp_path, [])
    assert main([str(tmp_path / "missing.png"), '--landmarks', str(landmarks_path)]) == 1


def test_non_finite_landmark_file_is_rejected(tmp_path, capsys):
    image_path, _ = _write_inputs(tmp_path, [])
    landmarks_path = tmp_path / "nan_landmarks.json"
    landmarks_path.write_text('{"faces": [{"landmarks": [[NaN, 1], [2, 3]]}]}', encoding='utf-8')

    assert main([str(image_path), '--landmarks', str(landmarks_path)]) == 1
    assert 'Non-finite landmark coordinate' in capsys.readouterr().out


@pytest.fixture
def restore_bundled_config():
    yield
    load_config(str(Path(face_aesthetics.__file__).parent / "config.yaml"))
    reconfigure_logging()


def test_config_flag_applies_logging_section(tmp_path, restore_bundled_config):
    face = {'landmarks': [p.to_list() for p in build_mesh()]}
    image_path, landmarks_path = _write_inputs(tmp_path, [face])
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "logging:\n  level: DEBUG\n  console:\n    enabled: true\n    level: ERROR\n",
        encoding='utf-8',
    )

    assert main([str(image_path), '--landmarks', str(landmarks_path), '--config', str(config_path)]) == 0

    engine_logger = logging.getLogger('face_aesthetics.core.scoring_engine')
    assert engine_logger.level == logging.DEBUG
    assert [h.level for h in engine_logger.handlers] == [logging.ERROR]
