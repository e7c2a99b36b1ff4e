from pathlib import PurePosixPath

from langbox.core.exceptions import ErrorCode, LinguistError
from langbox.core.logging import get_logger
from langbox.domain.langstats.diff import reconstruct_text
from langbox.domain.langstats.schemas import FileChange, LanguageStat
from langbox.infra.linguist.base import BaseLanguageClassifier
from langbox.infra.linguist.factory import get_classifier

logger = get_logger(__name__)


def staged_name(index: int, path: str) -> str:
    """순번과 원본 확장자로 임시 파일 이름 생성 - 원본 경로는 버린다"""
    return f"{index}{PurePosixPath(path).suffix}"


async def classify_files(
    files: list[FileChange],
    classifier: BaseLanguageClassifier | None = None,
) -> list[LanguageStat]:
    """변경 파일을 언어별로 분류하고 추가/삭제 줄 수 집계.

    Args:
        files: 변경 파일 목록
        classifier: 언어 분류기, 없으면 기본 linguist 분류기

    Returns:
        percent 내림차순 정렬된 언어 통계
    """
    classifier = classifier or get_classifier()

    staged = {staged_name(i, f.path): f for i, f in enumerate(files)}
    blobs = {name: reconstruct_text(f) for name, f in staged.items()}

    result = await classifier.analyze(blobs)

    stats = []
    for name, entry in result.items():
        try:
            percent = float(entry.percentage)
        except ValueError as e:
            raise LinguistError(
                f"잘못된 비율 값 language={name} percentage={entry.percentage}",
                error_code=ErrorCode.LINGUIST_PARSE_ERROR,
            ) from e

        sources = [staged[p] for p in entry.files if p in staged]
        stats.append(
            LanguageStat(
                name=name,
                percent=percent,
                additions=sum(f.additions for f in sources),
                deletions=sum(f.deletions for f in sources),
                file_count=len(entry.files),
            )
        )

    stats.sort(key=lambda s: s.percent, reverse=True)
    return stats
