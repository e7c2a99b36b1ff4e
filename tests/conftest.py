"""테스트 공통 fixture"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import httpx
import pytest

from langbox.core.config import Settings
from langbox.domain.langstats.schemas import (
    CommitDetail,
    CommitListPayload,
    Event,
    FileChange,
    HeadOnlyPayload,
    LinguistEntry,
    PushCommit,
)
from langbox.infra.linguist.base import BaseLanguageClassifier

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


class StubClassifier(BaseLanguageClassifier):
    """고정된 결과를 반환하는 분류기"""

    def __init__(self, result: dict[str, dict] | None = None):
        self.result = {
            name: LinguistEntry.model_validate(entry) for name, entry in (result or {}).items()
        }
        self.calls: list[dict[str, str]] = []

    async def analyze(self, blobs: dict[str, str]) -> dict[str, LinguistEntry]:
        self.calls.append(blobs)
        return self.result


@pytest.fixture
def now() -> datetime:
    """테스트 기준 시각"""
    return NOW


@pytest.fixture
def make_push_event():
    """push 이벤트 생성 helper"""

    def _create(
        sha: str,
        days_ago: float = 1,
        actor: str = "octocat",
        repo: str = "octocat/hello",
        event_type: str = "PushEvent",
        commits: list[tuple[str, bool]] | None = None,
        base: datetime | None = None,
    ) -> Event:
        if commits is None:
            payload = HeadOnlyPayload(head=sha)
        else:
            payload = CommitListPayload(
                commits=[PushCommit(sha=s, distinct=d) for s, d in commits],
                head=sha,
            )
        return Event(
            type=event_type,
            actor_login=actor,
            repo_full_name=repo,
            created_at=(base or NOW) - timedelta(days=days_ago),
            payload=payload,
        )

    return _create


@pytest.fixture
def sample_commits() -> list[CommitDetail]:
    """테스트용 커밋 목록 - a.py, b.go"""
    return [
        CommitDetail(
            sha="aaa111",
            parent_shas=["p1"],
            files=[
                FileChange(
                    path="src/a.py",
                    additions=5,
                    deletions=1,
                    changes=6,
                    status="modified",
                    patch="@@ -1,2 +1,6 @@\n+import os\n-import sys\n context",
                )
            ],
        ),
        CommitDetail(
            sha="bbb222",
            parent_shas=["p2"],
            files=[FileChange(path="cmd/b.go", additions=3, deletions=0, changes=3, status="added")],
        ),
    ]


@pytest.fixture
def sample_classifier() -> StubClassifier:
    """Python/Go 결과를 반환하는 분류기"""
    return StubClassifier(
        {
            "Python": {"percentage": "62.5", "files": ["0.py"]},
            "Go": {"percentage": "37.5", "files": ["1.go"]},
        }
    )


@pytest.fixture
def test_settings() -> Settings:
    """테스트용 설정"""
    return Settings(
        _env_file=None,
        gh_token="test-token-123",
        gist_id="gist123",
        username="octocat",
        days=14,
    )


@pytest.fixture
def mock_github_response():
    """GitHub API 응답 mock 생성"""
    mock = MagicMock()
    mock.raise_for_status = MagicMock()
    return mock


@pytest.fixture
def create_http_error():
    """HTTPStatusError 생성 helper"""

    def _create(status_code: int, message: str = "Error"):
        return httpx.HTTPStatusError(
            message,
            request=httpx.Request("GET", "https://test.com"),
            response=httpx.Response(status_code),
        )

    return _create


@pytest.fixture
def make_classifier():
    """결과를 지정할 수 있는 분류기 생성 helper"""
    return StubClassifier
