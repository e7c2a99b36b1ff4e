from langbox.core.config import settings
from langbox.core.logging import get_logger
from langbox.infra.linguist.base import BaseLanguageClassifier
from langbox.infra.linguist.client import LinguistClassifier

logger = get_logger(__name__)

_classifier: BaseLanguageClassifier | None = None


def get_classifier() -> BaseLanguageClassifier:
    """언어 분류기 반환"""
    global _classifier

    if _classifier is not None:
        return _classifier

    _classifier = LinguistClassifier(
        command=settings.linguist_command,
        timeout=settings.linguist_timeout,
    )
    logger.info("linguist 분류기 초기화 command=%s", settings.linguist_command)
    return _classifier


def reset_classifier() -> None:
    """분류기 캐시 초기화 - 테스트용"""
    global _classifier
    _classifier = None
