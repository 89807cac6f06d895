"""
Logging configuration module for the face aesthetics scorer.
Provides centralized logging setup with file and console handlers.
"""
import logging
import logging.handlers
from pathlib import Path

from .config_loader import get_config


def setup_logging(name: str = None) -> logging.Logger:
    """
    로깅 시스템 설정 및 로거 반환

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)

    Returns:
        logging.Logger: 설정된 로거 객체
    """
    config = get_config()

    logger = logging.getLogger(name or __name__)

    # 이미 핸들러가 설정되어 있으면 중복 설정 방지
    if logger.handlers:
        return logger

    log_level = getattr(logging, str(config.get('logging.level', 'INFO')).upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(
        config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt=config.get('logging.date_format', '%Y-%m-%d %H:%M:%S')
    )

    # 콘솔 핸들러 설정
    if config.get('logging.console.enabled', True):
        console_handler = logging.StreamHandler()
        console_level = getattr(logging, str(config.get('logging.console.level', 'INFO')).upper(), logging.INFO)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # 파일 핸들러 설정
    if config.get('logging.file.enabled', False):
        log_dir = Path(config.get('logging.file.directory', 'logs'))
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / config.get('logging.file.filename', 'face_aesthetics.log')

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=config.get('logging.file.max_bytes', 10485760),
            backupCount=config.get('logging.file.backup_count', 5),
            encoding='utf-8'
        )
        file_level = getattr(logging, str(config.get('logging.file.level', 'DEBUG')).upper(), logging.DEBUG)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    로거 가져오기 (간편 함수)

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)

    Returns:
        logging.Logger: 설정된 로거 객체
    """
    return setup_logging(name)


def reconfigure_logging(prefix: str = 'face_aesthetics'):
    """
    이미 생성된 패키지 로거의 핸들러를 현재 설정으로 다시 구성

    모듈 로거는 import 시점에 설정되므로 --config 로 설정 파일을 바꾼 뒤 호출해야
    logging 섹션이 반영된다.
    """
    # PlaceHolder 항목은 제외 (setup_logging 을 거친 로거만 다시 구성)
    loggers = [
        obj for name, obj in list(logging.Logger.manager.loggerDict.items())
        if (name == prefix or name.startswith(prefix + '.'))
        and isinstance(obj, logging.Logger) and (obj.handlers or obj.level != logging.NOTSET)
    ]
    for logger in loggers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        setup_logging(logger.name)
