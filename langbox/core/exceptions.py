from enum import Enum


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    GITHUB_API_ERROR = "GITHUB_API_ERROR"
    LINGUIST_ERROR = "LINGUIST_ERROR"
    LINGUIST_PARSE_ERROR = "LINGUIST_PARSE_ERROR"
    GIST_UPDATE_ERROR = "GIST_UPDATE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class LangBoxError(Exception):
    def __init__(
        self,
        exit_code: int,
        error_code: ErrorCode | str,
        message: str,
        detail: str | None = None,
    ):
        self.exit_code = exit_code
        self.error_code = error_code
        self.message = message
        self.detail = detail
        super().__init__(message)


class ConfigurationError(LangBoxError):
    def __init__(self, detail: str | None = None):
        super().__init__(
            exit_code=2,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            message="필수 설정이 누락되었습니다",
            detail=detail,
        )


class GitHubAPIError(LangBoxError):
    def __init__(self, detail: str | None = None):
        super().__init__(
            exit_code=1,
            error_code=ErrorCode.GITHUB_API_ERROR,
            message="GitHub API 호출에 실패했습니다",
            detail=detail,
        )


class LinguistError(LangBoxError):
    def __init__(
        self,
        detail: str | None = None,
        error_code: ErrorCode = ErrorCode.LINGUIST_ERROR,
    ):
        super().__init__(
            exit_code=1,
            error_code=error_code,
            message="언어 분석에 실패했습니다",
            detail=detail,
        )


class GistUpdateError(LangBoxError):
    def __init__(self, detail: str | None = None):
        super().__init__(
            exit_code=1,
            error_code=ErrorCode.GIST_UPDATE_ERROR,
            message="Gist 업데이트에 실패했습니다",
            detail=detail,
        )
