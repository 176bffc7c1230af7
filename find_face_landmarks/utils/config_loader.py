"""
Configuration Loader Module
설정 파일(config.yaml)을 로드하고 관리하는 모듈
"""
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_ENV_VAR = 'FIND_FACE_LANDMARKS_CONFIG'
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"


class Config:
    """
    Configuration Manager

    config.yaml 파일을 로드하고 설정값에 접근할 수 있는 인터페이스 제공

    Usage:
        config = Config()
        num_faces = config.get('engine.num_faces')
        # or
        num_faces = config.engine.num_faces
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Configuration 초기화

        Args:
            config_path: config.yaml 파일 경로 (None이면 환경 변수 → 패키지 기본값 순으로 탐색)
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self):
        """config.yaml 파일 로드"""
        if not self.config_path.is_file():
            raise FileNotFoundError(
                f"Config file not found: {self.config_path}\n"
                f"Pass --config or set the {CONFIG_ENV_VAR} environment variable."
            )

        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML format in {self.config_path}: {e}")

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config root must be a mapping: {self.config_path}")
        self._config = loaded

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        점(.) 구분자로 중첩된 설정값 가져오기

        Args:
            key_path: 설정 키 경로 (예: 'engine.min_tracking_confidence')
            default: 키가 없을 때 반환할 기본값

        Returns:
            설정값 또는 기본값

        Example:
            >>> config.get('export.layout')
            'native'
        """
        value = self._config

        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def section(self, name: str) -> "ConfigSection":
        """하위 섹션 반환 (없으면 빈 섹션)"""
        value = self._config.get(name)
        return ConfigSection(value if isinstance(value, dict) else {})

    def __getattr__(self, name: str):
        """
        속성 접근 방식으로 설정값 가져오기

        Example:
            >>> config.logging.console.level
            'WARNING'
        """
        if name.startswith('_'):
            raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")

        if name in self._config:
            value = self._config[name]
            if isinstance(value, dict):
                return ConfigSection(value)
            return value

        raise AttributeError(f"Config has no key '{name}'")

    def __repr__(self):
        return f"Config(path={self.config_path})"


class ConfigSection:
    """
    Config의 하위 섹션을 나타내는 헬퍼 클래스
    중첩된 딕셔너리를 속성 접근 방식으로 사용 가능
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")

        if name in self._data:
            value = self._data[name]
            if isinstance(value, dict):
                return ConfigSection(value)
            return value

        raise AttributeError(f"ConfigSection has no key '{name}'")

    def get(self, key: str, default: Any = None) -> Any:
        """키로 값 가져오기 (기본값 지원)"""
        return self._data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self):
        return f"ConfigSection({list(self._data.keys())})"


_global_config: Optional[Config] = None


def get_config(config_path: Optional[str] = None) -> Config:
    """
    전역 Config 인스턴스 반환 (Singleton 패턴)

    Args:
        config_path: 지정하면 해당 파일로 전역 설정을 교체

    Returns:
        Config 인스턴스
    """
    global _global_config

    if _global_config is None or config_path is not None:
        _global_config = Config(config_path)

    return _global_config


def reset_config():
    """전역 설정 제거 (다음 get_config 호출 시 다시 로드)"""
    global _global_config
    _global_config = None
