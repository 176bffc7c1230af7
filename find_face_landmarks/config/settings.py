"""시스템 설정 클래스 정의"""

from dataclasses import dataclass, fields

from .constants import LAYOUTS, LAYOUT_NATIVE
from ..utils.config_loader import Config
from ..utils.exceptions import ConfigurationError
from ..utils.validators import validate_confidence


@dataclass
class EngineConfig:
    """MediaPipe FaceLandmarker 설정"""

    num_faces: int = 5
    min_face_detection_confidence: float = 0.5
    min_face_presence_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    frame_interval_ms: int = 33  # VIDEO 모드 프레임 간 타임스탬프 간격

    def __post_init__(self):
        """설정 값 검증"""
        for name in ('num_faces', 'frame_interval_ms'):
            _check_type(name, getattr(self, name), int)
        try:
            for name in ('min_face_detection_confidence',
                         'min_face_presence_confidence',
                         'min_tracking_confidence'):
                _check_type(name, getattr(self, name), (int, float))
                validate_confidence(getattr(self, name), name)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(str(e))
        if self.num_faces < 1:
            raise ConfigurationError("num_faces must be >= 1")
        if self.frame_interval_ms < 1:
            raise ConfigurationError("frame_interval_ms must be >= 1")

    @classmethod
    def from_config(cls, config: Config) -> "EngineConfig":
        return cls(**_known_keys(cls, config.section('engine').to_dict()))


@dataclass
class ExportConfig:
    """CSV 출력 설정"""

    layout: str = LAYOUT_NATIVE

    def __post_init__(self):
        if self.layout not in LAYOUTS:
            raise ConfigurationError(
                f"layout must be one of {', '.join(LAYOUTS)}, got '{self.layout}'"
            )

    @classmethod
    def from_config(cls, config: Config) -> "ExportConfig":
        return cls(**_known_keys(cls, config.section('export').to_dict()))


def _check_type(name: str, value, expected) -> None:
    # YAML의 true/false 는 bool(int 하위 클래스)로 로드되므로 따로 거부
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ConfigurationError(
            f"{name} must be a number, got {type(value).__name__} ({value!r})"
        )


def _known_keys(cls, values: dict) -> dict:
    names = {f.name for f in fields(cls)}
    unknown = set(values) - names
    if unknown:
        raise ConfigurationError(
            f"Unknown {cls.__name__} option(s): {', '.join(sorted(unknown))}"
        )
    return values
