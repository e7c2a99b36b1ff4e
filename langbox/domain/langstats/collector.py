import asyncio

from langbox.core.config import settings
from langbox.core.logging import get_logger
from langbox.domain.langstats.schemas import (
    CommitDetail,
    CommitFetchResult,
    CommitRef,
    FileChange,
)
from langbox.infra.github.client import get_commit

logger = get_logger(__name__)


async def collect_commits(
    refs: list[CommitRef],
    token: str | None,
    max_concurrent: int | None = None,
) -> list[CommitDetail]:
    """커밋 참조를 동시에 상세 조회.

    개별 조회 실패는 로그만 남기고 결과에서 제외한다. 결과 순서는
    입력 순서와 같지 않을 수 있다.

    Args:
        refs: 커밋 참조 목록
        token: GitHub 토큰
        max_concurrent: 동시 요청 수 제한

    Returns:
        조회에 성공한 커밋 상세 목록
    """
    if not refs:
        return []

    semaphore = asyncio.Semaphore(max_concurrent or settings.github_max_concurrent_requests)

    async def _fetch(ref: CommitRef) -> CommitFetchResult:
        async with semaphore:
            try:
                commit = await get_commit(ref.repo_full_name, ref.sha, token)
            except Exception as e:
                logger.warning(
                    "커밋 조회 실패 repo=%s sha=%s error=%s",
                    ref.repo_full_name,
                    ref.sha[:7],
                    e,
                )
                return CommitFetchResult(ref=ref, error=f"{type(e).__name__}: {e}")
            return CommitFetchResult(ref=ref, commit=commit)

    results = await asyncio.gather(*[_fetch(ref) for ref in refs])

    commits = [result.commit for result in results if result.ok]
    logger.info("커밋 조회 완료 total=%d failed=%d", len(commits), len(results) - len(commits))
    return commits


def extract_files(commits: list[CommitDetail]) -> list[FileChange]:
    """merge 커밋을 제외하고 변경 파일 목록 평탄화"""
    files = []
    skipped = 0
    for commit in commits:
        if commit.is_merge:
            skipped += 1
            continue
        files.extend(commit.files)

    logger.info("변경 파일 추출 files=%d merge_skipped=%d", len(files), skipped)
    return files
