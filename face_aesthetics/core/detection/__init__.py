"""Landmark detection collaborators"""

from .base import LandmarkDetector
from .json_loader import JsonLandmarkDetector, load_detections, parse_detections
from .mediapipe_detector import MediaPipeLandmarkDetector, convert_face_mesh_results

__all__ = [
    'LandmarkDetector',
    'JsonLandmarkDetector',
    'load_detections',
    'parse_detections',
    'MediaPipeLandmarkDetector',
    'convert_face_mesh_results',
]
