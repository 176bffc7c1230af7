"""
Logging configuration module for find_face_landmarks.
Provides centralized logging setup with file and console handlers.
"""
import logging
import logging.handlers
from pathlib import Path

from .config_loader import Config

ROOT_LOGGER_NAME = 'find_face_landmarks'
DEFAULT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(config: Config,
                  verbose: bool = False,
                  force: bool = False) -> logging.Logger:
    """
    패키지 루트 로거 설정

    모듈별 로거(get_logger(__name__))는 루트 로거로 전파되므로
    핸들러는 루트 로거에만 붙인다.

    Args:
        config: 설정 객체 (logging 섹션 사용)
        verbose: True면 콘솔 레벨을 DEBUG로 강제
        force: 기존 핸들러를 제거하고 다시 설정

    Returns:
        logging.Logger: 설정된 루트 로거
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # 이미 핸들러가 설정되어 있으면 중복 설정 방지
    if logger.handlers and not force:
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_config = config.section('logging')

    log_level = getattr(logging, str(log_config.get('level', 'INFO')).upper(), logging.INFO)
    formatter = logging.Formatter(
        log_config.get('format', DEFAULT_FORMAT),
        datefmt=log_config.get('date_format')
    )

    console = log_config.get('console', {}) or {}
    file_cfg = log_config.get('file', {}) or {}

    if verbose:
        log_level = logging.DEBUG
    logger.setLevel(log_level)
    logger.propagate = False

    # 콘솔 핸들러 (stderr)
    if console.get('enabled', True):
        console_handler = logging.StreamHandler()
        if verbose:
            console_level = logging.DEBUG
        else:
            console_level = getattr(logging, str(console.get('level', 'WARNING')).upper(), logging.WARNING)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # 파일 핸들러 (RotatingFileHandler)
    if file_cfg.get('enabled', False):
        log_dir = Path(file_cfg.get('directory', 'logs'))
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / file_cfg.get('filename', 'find_face_landmarks.log'),
            maxBytes=file_cfg.get('max_bytes', 1048576),
            backupCount=file_cfg.get('backup_count', 3),
            encoding='utf-8'
        )
        file_level = getattr(logging, str(file_cfg.get('level', 'DEBUG')).upper(), logging.DEBUG)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    로거 가져오기 (간편 함수)

    설정 파일을 읽지 않으므로 모듈 import 시점에 호출해도 된다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
    """
    return logging.getLogger(name or ROOT_LOGGER_NAME)
