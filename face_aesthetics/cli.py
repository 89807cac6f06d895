#!/usr/bin/env python3
"""
Command line entry point: score one or more portrait images.

Examples:
    face-aesthetics selfie.jpg
    face-aesthetics a.jpg b.png --output results.json --parallel
    face-aesthetics selfie.jpg --landmarks selfie_landmarks.json
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .core import ScoringEngine, render_advice_text
from .core.detection import JsonLandmarkDetector, LandmarkDetector, MediaPipeLandmarkDetector
from .models import AnalysisReport
from .utils import get_config, get_logger, load_config, reconfigure_logging
from .utils.exceptions import FaceAestheticsError, NoFaceDetectedError
from .utils.image_utils import fit_within, load_image
from .utils.json_exporter import save_reports, to_report_json

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='face-aesthetics',
        description='Score facial symmetry, proportion, structure and skin health from portrait images.'
    )
    parser.add_argument('images', nargs='+', help='Image files to analyze')
    parser.add_argument('--landmarks', help='JSON file with precomputed landmarks (skips MediaPipe)')
    parser.add_argument('--output', '-o', help='Write JSON results to this file')
    parser.add_argument('--config', help='Path to an alternative config.yaml (logging, image, engine and detector sections)')
    parser.add_argument('--parallel', action='store_true', help='Run analyzers on a thread pool')
    parser.add_argument('--no-resize', action='store_true', help='Analyze images at full resolution')
    return parser


def create_detector(landmarks_path: Optional[str]) -> LandmarkDetector:
    if landmarks_path:
        return JsonLandmarkDetector(landmarks_path)
    return MediaPipeLandmarkDetector()


def analyze_file(
    image_path: Path,
    detector: LandmarkDetector,
    engine: ScoringEngine,
    resize: bool,
) -> Tuple[AnalysisReport, Dict[str, Any]]:
    """이미지 한 장 분석 -> (리포트, JSON 엔트리)"""
    config = get_config()

    buffer = load_image(image_path)
    if resize:
        buffer = fit_within(
            buffer,
            max_width=config.get('image.max_width', 480),
            max_height=config.get('image.max_height', 640),
        )

    detections = detector.detect(buffer)
    report = engine.analyze_detections(buffer, detections)

    entry = to_report_json(report, image_path=str(image_path))
    entry['success'] = True
    entry['faces_detected'] = len(detections)
    return report, entry


def print_report(report: AnalysisReport):
    scores = report.to_dict()['scores']
    print(f"✅ Overall: {scores['overall']}")
    for name in ('symmetry', 'proportion', 'structure', 'skin'):
        sub = scores[name]
        flag = '' if sub['status'] == 'computed' else f"  ({sub['status']})"
        print(f"   {name.capitalize():<11} {sub['score']:>3}{flag}")
    print()
    print(render_advice_text(report.advice))


def run(args: argparse.Namespace) -> int:
    if args.config:
        load_config(args.config)
        reconfigure_logging()
    config = get_config()

    engine = ScoringEngine(
        parallel=args.parallel or bool(config.get('engine.parallel_analyzers', False)),
        max_workers=config.get('engine.max_workers', 4),
    )
    # 외부 랜드마크 파일은 원본 이미지 좌표계 기준이므로 리사이즈하지 않음
    resize = (
        not args.no_resize
        and not args.landmarks
        and bool(config.get('image.resize', True))
    )

    results: List[Dict[str, Any]] = []
    failures = 0

    try:
        detector = create_detector(args.landmarks)
    except FaceAestheticsError as e:
        logger.error(f"Detector initialization failed: {e}")
        print(f"❌ {e}")
        return 1

    with detector:
        for idx, image in enumerate(args.images, 1):
            image_path = Path(image)
            print(f"[{idx}/{len(args.images)}] {image_path.name}")
            print("-" * 60)

            start = time.time()
            try:
                report, entry = analyze_file(image_path, detector, engine, resize)
            except NoFaceDetectedError as e:
                failures += 1
                print(f"❌ {e}\n")
                results.append({'image_path': str(image_path), 'success': False, 'error': 'no face detected'})
                continue
            except FaceAestheticsError as e:
                failures += 1
                logger.error(f"Analysis failed for {image_path}: {e}")
                print(f"❌ {e}\n")
                results.append({'image_path': str(image_path), 'success': False, 'error': str(e)})
                continue

            entry['analysis_time'] = round(time.time() - start, 3)
            results.append(entry)

            print_report(report)
            print()

    if args.output:
        output_file = save_reports(results, args.output)
        print(f"💾 Results saved to: {output_file}")

    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
