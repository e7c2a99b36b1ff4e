import httpx

from langbox.core.config import Settings
from langbox.core.exceptions import GistUpdateError
from langbox.core.logging import get_logger
from langbox.domain.langstats.classifier import classify_files
from langbox.domain.langstats.collector import collect_commits, extract_files
from langbox.domain.langstats.harvester import harvest_commit_refs
from langbox.domain.langstats.schemas import LanguageStat
from langbox.domain.langstats.text import create_content
from langbox.infra.github.client import get_gist, update_gist
from langbox.infra.linguist.base import BaseLanguageClassifier

logger = get_logger(__name__)


async def collect_language_stats(
    config: Settings,
    classifier: BaseLanguageClassifier | None = None,
) -> list[LanguageStat]:
    """최근 커밋을 수집해 언어별 통계 계산.

    Args:
        config: 애플리케이션 설정
        classifier: 언어 분류기, 없으면 기본 linguist 분류기

    Returns:
        percent 내림차순 정렬된 언어 통계
    """
    refs = await harvest_commit_refs(
        config.username,
        config.gh_token,
        days=config.days,
        per_page=config.events_per_page,
        max_events=config.max_events,
    )
    commits = await collect_commits(
        refs, config.gh_token, max_concurrent=config.github_max_concurrent_requests
    )
    logger.info("전체 커밋 조회 완료 commits=%d", len(commits))

    files = extract_files(commits)
    return await classify_files(files, classifier)


async def publish_content(gist_id: str, content: str, token: str | None) -> str:
    """Gist의 첫 번째 파일을 본문으로 덮어쓰기.

    Returns:
        덮어쓴 파일 이름

    Raises:
        GistUpdateError: Gist 조회/수정 실패 또는 파일이 없는 경우
    """
    try:
        gist = await get_gist(gist_id, token)
        if not gist.files:
            raise GistUpdateError(f"Gist에 파일이 없습니다 gist={gist_id}")

        filename = next(iter(gist.files))
        await update_gist(gist_id, filename, content, token)
    except httpx.HTTPError as e:
        raise GistUpdateError(f"{type(e).__name__}: {e}") from e

    return filename


async def update_language_gist(
    config: Settings,
    classifier: BaseLanguageClassifier | None = None,
) -> str | None:
    """언어 통계를 계산해 Gist 업데이트.

    언어가 하나도 감지되지 않으면 Gist를 수정하지 않는다.

    Args:
        config: 애플리케이션 설정
        classifier: 언어 분류기, 없으면 기본 linguist 분류기

    Returns:
        게시한 본문, 게시하지 않았으면 None
    """
    logger.info("언어 통계 업데이트 시작 username=%s days=%d", config.username, config.days)

    stats = await collect_language_stats(config, classifier)

    if not stats:
        logger.info(
            "감지된 언어 없음, Gist 업데이트 생략 - 보통 기간 내 커밋이 없는 경우",
            days=config.days,
        )
        return None

    for stat in stats:
        logger.info(
            "언어 집계 language=%s files=%d changes=%d",
            stat.name,
            stat.file_count,
            stat.additions + stat.deletions,
        )

    content = create_content(stats)
    logger.info("Gist 본문 생성\n%s", content)

    filename = await publish_content(config.gist_id, content, config.gh_token)
    logger.info("Gist 업데이트 성공 gist=%s filename=%s", config.gist_id, filename)
    return content
