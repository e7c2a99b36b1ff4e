from langbox.domain.langstats.schemas.base import (
    CommitFetchResult,
    LanguageStat,
    LinguistEntry,
)
from langbox.domain.langstats.schemas.github import (
    CommitDetail,
    CommitListPayload,
    CommitRef,
    Event,
    FileChange,
    Gist,
    GistFile,
    HeadOnlyPayload,
    PushCommit,
)

__all__ = [
    "CommitDetail",
    "CommitFetchResult",
    "CommitListPayload",
    "CommitRef",
    "Event",
    "FileChange",
    "Gist",
    "GistFile",
    "HeadOnlyPayload",
    "LanguageStat",
    "LinguistEntry",
    "PushCommit",
]
