"""커스텀 예외 클래스 정의"""


class FaceAestheticsError(Exception):
    """기본 예외 클래스"""
    pass


class InvalidImageError(FaceAestheticsError):
    """잘못된 이미지 입력 예외"""
    pass


class NoFaceDetectedError(FaceAestheticsError):
    """얼굴 미검출 예외 (엔진 호출 전 단락 처리용)"""
    pass


class LandmarkIndexError(FaceAestheticsError, IndexError):
    """메쉬에 존재하지 않는 랜드마크 인덱스 접근"""
    pass


class ConfigurationError(FaceAestheticsError):
    """설정 오류 예외"""
    pass


class DetectionError(FaceAestheticsError):
    """랜드마크 검출기 실행/입력 파싱 실패 예외"""
    pass
