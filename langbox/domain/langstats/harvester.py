import math
from datetime import datetime, timedelta, timezone

import httpx

from langbox.core.exceptions import GitHubAPIError
from langbox.core.logging import get_logger
from langbox.domain.langstats.schemas import CommitListPayload, CommitRef, Event
from langbox.infra.github.client import get_user_events

logger = get_logger(__name__)

PUSH_EVENT = "PushEvent"

# GitHub은 최대 300개의 이벤트만 반환하고 90일이 지난 이벤트는 반환하지 않는다
MAX_EVENTS = 300
PER_PAGE = 100


def _is_same_identity(login: str, username: str) -> bool:
    """GitHub 로그인은 대소문자를 구분하지 않는다"""
    return login.casefold() == username.casefold()


def _expand_refs(event: Event) -> list[CommitRef]:
    """push 이벤트를 distinct 커밋 참조 목록으로 변환.

    commits 목록이 없는 payload는 head SHA 하나를 대상으로 한다.
    """
    payload = event.payload

    if isinstance(payload, CommitListPayload):
        return [
            CommitRef(repo_full_name=event.repo_full_name, sha=c.sha, distinct=c.distinct)
            for c in payload.commits
            if c.distinct
        ]

    if not payload.head:
        logger.info("head SHA 없는 push 이벤트 스킵 repo=%s", event.repo_full_name)
        return []

    return [CommitRef(repo_full_name=event.repo_full_name, sha=payload.head)]


def _dedupe(refs: list[CommitRef]) -> list[CommitRef]:
    """레포와 SHA 기준 중복 제거, 먼저 나온 순서 유지"""
    seen: set[tuple[str, str]] = set()
    result = []
    for ref in refs:
        key = (ref.repo_full_name, ref.sha)
        if key in seen:
            continue
        seen.add(key)
        result.append(ref)
    return result


async def harvest_commit_refs(
    username: str,
    token: str | None,
    days: int,
    per_page: int = PER_PAGE,
    max_events: int = MAX_EVENTS,
    now: datetime | None = None,
) -> list[CommitRef]:
    """최근 push 이벤트에서 상세 조회할 커밋 참조 수집.

    페이지는 순서대로 조회한다. 한 페이지에서 기간 내 이벤트 수가 사용자의
    push 이벤트 수보다 적으면 기간 경계를 넘은 것으로 보고 중단한다.
    페이지 조회 실패는 수집 종료로 처리하고 그때까지의 결과를 유지한다.

    Args:
        username: GitHub 유저네임
        token: GitHub 토큰
        days: 집계 기간 (일)
        per_page: 페이지당 이벤트 개수
        max_events: 조회할 최대 이벤트 개수
        now: 기준 시각, 테스트용

    Returns:
        중복 제거된 커밋 참조 목록
    """
    now = now or datetime.now(timezone.utc)
    from_date = now - timedelta(days=days)
    pages = math.ceil(max_events / per_page)

    refs: list[CommitRef] = []

    for page in range(1, pages + 1):
        try:
            events = await get_user_events(username, token, per_page=per_page, page=page)
        except (httpx.HTTPError, GitHubAPIError) as e:
            logger.warning("이벤트 조회 실패, 수집 종료 page=%d error=%s", page, e)
            break

        push_events = [
            event
            for event in events
            if event.type == PUSH_EVENT and _is_same_identity(event.actor_login, username)
        ]
        recent_events = [
            event
            for event in push_events
            if event.created_at is not None and event.created_at > from_date
        ]

        logger.info("기간 내 push 이벤트 조회 page=%d count=%d", page, len(recent_events))

        for event in recent_events:
            refs.extend(_expand_refs(event))

        if len(recent_events) < len(push_events):
            logger.info("기간 경계 도달, 수집 종료 page=%d", page)
            break
    else:
        logger.info("이벤트 페이지 한도 도달 pages=%d", pages)

    result = _dedupe(refs)
    logger.info("커밋 참조 수집 완료 refs=%d", len(result))
    return result
