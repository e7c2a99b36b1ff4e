from abc import ABC, abstractmethod

from langbox.domain.langstats.schemas import LinguistEntry


class BaseLanguageClassifier(ABC):
    """언어 분류기 추상 클래스"""

    @abstractmethod
    async def analyze(self, blobs: dict[str, str]) -> dict[str, LinguistEntry]:
        """파일 이름과 내용으로 언어별 비율과 파일 목록 반환

        Args:
            blobs: 파일 이름을 키로, 내용을 값으로 하는 딕셔너리

        Returns:
            언어 이름을 키로 하는 분석 결과
        """
        pass
