import re

import httpx
from pydantic import ValidationError

from langbox.core.config import settings
from langbox.core.exceptions import GitHubAPIError
from langbox.core.logging import get_logger
from langbox.domain.langstats.schemas import (
    CommitDetail,
    CommitListPayload,
    Event,
    FileChange,
    Gist,
    GistFile,
    HeadOnlyPayload,
    PushCommit,
)

logger = get_logger(__name__)

GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "lang-box/2.0"

REPO_NAME_PATTERN = re.compile(r"^([a-zA-Z0-9_.-]+)/([a-zA-Z0-9_.-]+)$")

_client = httpx.AsyncClient(timeout=settings.github_timeout)


def _get_headers(token: str | None = None) -> dict[str, str]:
    """GitHub API 요청 헤더 생성

    Args:
        token: GitHub 토큰

    Returns:
        HTTP 헤더 딕셔너리
    """
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _url(path: str) -> str:
    return f"{settings.github_api_base.rstrip('/')}{path}"


async def close_client():
    """httpx 클라이언트 종료"""
    await _client.aclose()


def parse_repo_name(full_name: str) -> tuple[str, str]:
    """owner/repo 형식의 레포지토리 이름 분리

    Args:
        full_name: 레포지토리 전체 이름

    Returns:
        owner, repo 튜플

    Raises:
        ValueError: 유효하지 않은 레포지토리 이름인 경우
    """
    match = REPO_NAME_PATTERN.match(full_name)
    if not match:
        raise ValueError(f"유효하지 않은 레포지토리 이름: {full_name}")
    return match.group(1), match.group(2)


def _parse_event(data: dict) -> Event:
    """이벤트 JSON을 Event 모델로 변환

    payload에 commits 목록이 있으면 CommitListPayload,
    없으면 head SHA만 가진 HeadOnlyPayload로 변환한다.
    """
    raw_payload = data.get("payload") or {}
    raw_commits = raw_payload.get("commits")

    if isinstance(raw_commits, list):
        payload = CommitListPayload(
            commits=[
                PushCommit(sha=c["sha"], distinct=c.get("distinct", True))
                for c in raw_commits
                if c.get("sha")
            ],
            head=raw_payload.get("head"),
        )
    else:
        payload = HeadOnlyPayload(head=raw_payload.get("head"))

    return Event(
        type=data.get("type"),
        actor_login=(data.get("actor") or {}).get("login", ""),
        repo_full_name=(data.get("repo") or {}).get("name", ""),
        created_at=data.get("created_at"),
        payload=payload,
    )


def _parse_file(data: dict) -> FileChange:
    return FileChange(
        path=data["filename"],
        additions=data.get("additions", 0),
        deletions=data.get("deletions", 0),
        changes=data.get("changes", 0),
        status=data.get("status", "modified"),
        patch=data.get("patch"),
    )


async def get_user_events(
    username: str,
    token: str | None = None,
    per_page: int = 100,
    page: int = 1,
) -> list[Event]:
    """사용자 이벤트 목록 조회

    토큰이 해당 사용자의 것이면 private 레포 이벤트도 포함된다.

    Args:
        username: GitHub 유저네임
        token: GitHub 토큰
        per_page: 페이지당 이벤트 개수, 최대 100
        page: 페이지 번호, 1부터 시작

    Returns:
        이벤트 목록

    Raises:
        httpx.HTTPError: 요청 실패 시
        GitHubAPIError: 응답 형식이 올바르지 않은 경우
    """
    url = _url(f"/users/{username}/events")
    params = {"per_page": min(per_page, 100), "page": page}

    response = await _client.get(url, headers=_get_headers(token), params=params)
    response.raise_for_status()
    try:
        data = response.json()
    except ValueError as e:
        raise GitHubAPIError(f"이벤트 응답 JSON 파싱 실패 page={page}: {e}") from e

    if not isinstance(data, list):
        raise GitHubAPIError(f"이벤트 응답 형식 오류 page={page}")

    try:
        events = [_parse_event(item) for item in data]
    except (ValidationError, KeyError, TypeError, AttributeError) as e:
        raise GitHubAPIError(f"이벤트 파싱 실패 page={page}: {e}") from e

    logger.debug("이벤트 조회 완료 username=%s page=%d count=%d", username, page, len(events))
    return events


async def get_commit(repo_full_name: str, ref: str, token: str | None = None) -> CommitDetail:
    """개별 커밋 상세 정보 조회

    Args:
        repo_full_name: owner/repo 형식의 레포지토리 이름
        ref: 커밋 SHA
        token: GitHub 토큰

    Returns:
        커밋 상세 정보
    """
    owner, repo = parse_repo_name(repo_full_name)
    url = _url(f"/repos/{owner}/{repo}/commits/{ref}")

    response = await _client.get(url, headers=_get_headers(token))
    response.raise_for_status()
    data = response.json()

    logger.debug("커밋 상세 조회 완료 repo=%s/%s sha=%s", owner, repo, ref[:7])
    return CommitDetail(
        sha=data["sha"],
        parent_shas=[p["sha"] for p in data.get("parents", [])],
        files=[_parse_file(f) for f in data.get("files", [])],
    )


async def get_gist(gist_id: str, token: str | None = None) -> Gist:
    """Gist 조회

    Args:
        gist_id: Gist ID
        token: GitHub 토큰

    Returns:
        파일 목록을 포함한 Gist
    """
    url = _url(f"/gists/{gist_id}")

    response = await _client.get(url, headers=_get_headers(token))
    response.raise_for_status()
    data = response.json()

    files = {
        name: GistFile(filename=f.get("filename", name), content=f.get("content"))
        for name, f in (data.get("files") or {}).items()
    }
    logger.info("Gist 조회 완료 gist=%s files=%d", gist_id, len(files))
    return Gist(id=data.get("id", gist_id), files=files)


async def update_gist(gist_id: str, filename: str, content: str, token: str | None = None) -> None:
    """Gist 파일 내용 덮어쓰기

    Args:
        gist_id: Gist ID
        filename: 덮어쓸 파일 이름
        content: 새 내용
        token: GitHub 토큰
    """
    url = _url(f"/gists/{gist_id}")
    body = {"files": {filename: {"content": content}}}

    response = await _client.patch(url, headers=_get_headers(token), json=body)
    response.raise_for_status()

    logger.info("Gist 업데이트 완료 gist=%s filename=%s", gist_id, filename)
