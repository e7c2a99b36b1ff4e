"""
lang-box - GitHub 언어 통계 Gist 업데이트

최근 커밋을 수집해 linguist로 언어를 분석하고 고정된 Gist를 갱신한다.
"""

import asyncio
import sys

from langbox.core.config import settings
from langbox.core.context import clear_context, set_run_id
from langbox.core.exceptions import ConfigurationError, LangBoxError
from langbox.core.logging import get_logger, setup_logging
from langbox.domain.langstats.service import update_language_gist
from langbox.infra.github.client import close_client as close_github_client

logger = get_logger(__name__)


async def main() -> int:
    """실행 진입점, 프로세스 종료 코드 반환"""
    setup_logging()
    set_run_id()

    try:
        missing = settings.validate_required()
        if missing:
            raise ConfigurationError(f"누락된 환경 변수: {', '.join(missing)}")

        await update_language_gist(settings)
        return 0
    except LangBoxError as e:
        logger.error(
            "실행 실패 error_code=%s message=%s detail=%s",
            getattr(e.error_code, "value", e.error_code),
            e.message,
            e.detail,
        )
        return e.exit_code
    except Exception as e:
        logger.exception("예상하지 못한 오류 error=%s", e)
        return 1
    finally:
        await close_github_client()
        clear_context()


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
