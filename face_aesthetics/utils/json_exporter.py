"""
분석 결과를 JSON 리포트로 변환
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

from ..models import AnalysisReport


def to_report_json(report: AnalysisReport, image_path: str = "") -> Dict[str, Any]:
    """
    AnalysisReport 를 JSON 직렬화 가능한 딕셔너리로 변환

    Args:
        report: ScoringEngine.analyze() 결과
        image_path: 원본 이미지 경로 (선택)

    Returns:
        dict: 점수, 산출 상태, 추천 문구, 메타데이터
    """
    output = report.to_dict()

    # 중립값/근사값으로 대체된 항목 목록 (호출자가 신뢰도 판단에 사용)
    output['degraded'] = [
        name for name in ('symmetry', 'proportion', 'structure', 'skin')
        if not getattr(report.scores, name).is_computed
    ]
    output['metadata'] = {
        'image_path': image_path,
        'timestamp': datetime.now().isoformat(timespec='seconds'),
    }
    return output


def save_reports(entries: List[Dict[str, Any]], path: Union[str, Path]) -> Path:
    """리포트 목록을 JSON 파일로 저장"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(entries, f, indent=2, ensure_ascii=False)
    return path
