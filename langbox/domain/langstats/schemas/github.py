from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class PushCommit(BaseModel):
    """push 이벤트에 포함된 커밋 항목"""

    sha: str
    distinct: bool = True


class CommitListPayload(BaseModel):
    """커밋 목록을 포함한 push payload"""

    kind: Literal["commit_list"] = "commit_list"
    commits: list[PushCommit]
    head: str | None = None


class HeadOnlyPayload(BaseModel):
    """head SHA만 포함한 push payload - /users/{username}/events 응답"""

    kind: Literal["head_only"] = "head_only"
    head: str | None = None


EventPayload = Annotated[CommitListPayload | HeadOnlyPayload, Field(discriminator="kind")]


class Event(BaseModel):
    """GitHub 활동 이벤트"""

    type: str | None
    actor_login: str
    repo_full_name: str
    created_at: datetime | None
    payload: EventPayload


class CommitRef(BaseModel):
    """상세 조회 대상 커밋 참조"""

    model_config = ConfigDict(frozen=True)

    repo_full_name: str
    sha: str
    distinct: bool = True


class FileChange(BaseModel):
    """커밋에서 변경된 파일"""

    path: str
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    status: str = "modified"
    patch: str | None = None


class CommitDetail(BaseModel):
    """커밋 상세 정보"""

    sha: str
    parent_shas: list[str]
    files: list[FileChange]

    @property
    def is_merge(self) -> bool:
        return len(self.parent_shas) > 1


class GistFile(BaseModel):
    """Gist 파일"""

    filename: str
    content: str | None = None


class Gist(BaseModel):
    """Gist 메타데이터"""

    id: str
    files: dict[str, GistFile]
