"""커스텀 예외 클래스 정의"""

from enum import Enum


class ErrorKind(Enum):
    """실패 종류 (CLI 종료 처리 및 로그 분류용)"""

    ARGUMENT = "argument"
    ENGINE_CONSTRUCTION = "engine_construction"
    IMAGE_DECODE = "image_decode"
    NO_FACE = "no_face"
    IO = "io"
    UNCLASSIFIED = "unclassified"


class FaceLandmarksException(Exception):
    """기본 예외 클래스"""

    kind = ErrorKind.UNCLASSIFIED


class ArgumentError(FaceLandmarksException):
    """명령행 인자 오류"""

    kind = ErrorKind.ARGUMENT


class ConfigurationError(FaceLandmarksException):
    """설정 오류 예외"""
    pass


class EngineConstructionError(FaceLandmarksException):
    """랜드마크 엔진 생성 실패 (모델 파일 오류 등)"""

    kind = ErrorKind.ENGINE_CONSTRUCTION


class InvalidImageError(FaceLandmarksException):
    """잘못된 이미지 입력 예외"""

    kind = ErrorKind.IMAGE_DECODE


class ImageDecodeError(InvalidImageError):
    """이미지 파일 디코딩 실패"""
    pass


class NoFaceDetectedError(FaceLandmarksException):
    """얼굴 검출 실패 예외"""

    kind = ErrorKind.NO_FACE


class FaceNotFoundError(FaceLandmarksException, KeyError):
    """프레임에 요청한 face id 가 없음"""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class LandmarkLayoutError(FaceLandmarksException):
    """랜드마크 레이아웃 변환 실패"""
    pass


class ExportError(FaceLandmarksException):
    """CSV 출력 실패"""

    kind = ErrorKind.IO
