from pydantic import BaseModel, ConfigDict

from langbox.domain.langstats.schemas.github import CommitDetail, CommitRef


class CommitFetchResult(BaseModel):
    """커밋 상세 조회 결과 - 성공 시 commit, 실패 시 error"""

    ref: CommitRef
    commit: CommitDetail | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.commit is not None


class LinguistEntry(BaseModel):
    """linguist --breakdown --json 출력의 언어별 항목"""

    percentage: str
    files: list[str]


class LanguageStat(BaseModel):
    """언어별 집계 결과"""

    model_config = ConfigDict(frozen=True)

    name: str
    percent: float
    additions: int
    deletions: int
    file_count: int
