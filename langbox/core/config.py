from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DAYS = 14
MIN_DAYS = 1
MAX_DAYS = 30


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # 필수 설정
    gh_token: str = ""
    gist_id: str = ""
    username: str = ""

    # 집계 기간 (일)
    days: int = DEFAULT_DAYS

    # GitHub
    github_api_base: str = "https://api.github.com"
    github_timeout: float = 60.0

    # 동시 요청 제한
    github_max_concurrent_requests: int = 5

    # 이벤트 피드 설정 - GitHub은 최대 300개, 90일까지만 반환
    events_per_page: int = 100
    max_events: int = 300

    # linguist 설정
    linguist_command: str = "github-linguist"
    linguist_timeout: float = 300.0

    # 로깅 설정
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @field_validator("days", mode="before")
    @classmethod
    def default_empty_days(cls, value):
        """비어 있거나 정수가 아니면 기본 기간 사용"""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_DAYS
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return DEFAULT_DAYS
        return value

    @field_validator("days")
    @classmethod
    def clamp_days(cls, value: int) -> int:
        return max(MIN_DAYS, min(MAX_DAYS, value))

    @field_validator("events_per_page")
    @classmethod
    def clamp_per_page(cls, value: int) -> int:
        return max(1, min(100, value))

    def validate_required(self) -> list[str]:
        """필수 설정 검증 후 누락된 항목 반환"""
        errors = []
        if not self.gh_token:
            errors.append("GH_TOKEN")
        if not self.gist_id:
            errors.append("GIST_ID")
        if not self.username:
            errors.append("USERNAME")
        return errors


settings = Settings()
