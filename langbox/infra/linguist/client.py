"""
github-linguist 기반 언어 분류기

linguist는 git 스냅샷을 분석하므로 임시 디렉토리에 git 레포를 만들고
파일을 커밋한 뒤 실행한다. 임시 디렉토리는 어떤 경로로 종료되든 삭제된다.
"""

import asyncio
import json
import shutil
import tempfile
import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from pydantic import ValidationError

from langbox.core.context import get_run_id
from langbox.core.exceptions import ErrorCode, LinguistError
from langbox.core.logging import get_logger
from langbox.domain.langstats.schemas import LinguistEntry
from langbox.infra.linguist.base import BaseLanguageClassifier

logger = get_logger(__name__)

WORKSPACE_PREFIX = ".linguist-tmp-"
GITATTRIBUTES = "*.* linguist-detectable\n"
DUMMY_USER_NAME = "dummy"
DUMMY_USER_EMAIL = "dummy@github.com"


def _cleanup(path: Path) -> None:
    """임시 디렉토리 삭제, 실패해도 예외를 던지지 않는다"""
    try:
        shutil.rmtree(path)
        logger.info("임시 디렉토리 삭제 path=%s", path)
    except OSError as e:
        logger.warning("임시 디렉토리 삭제 실패 path=%s error=%s", path, e)


@asynccontextmanager
async def staging_workspace(root: Path | None = None) -> AsyncIterator[Path]:
    """실행마다 고유한 임시 작업 디렉토리 생성

    Args:
        root: 상위 디렉토리, 없으면 시스템 임시 디렉토리

    Yields:
        생성된 디렉토리 경로
    """
    base = root or Path(tempfile.gettempdir())
    suffix = get_run_id() or uuid.uuid4().hex[:8]
    path = base / f"{WORKSPACE_PREFIX}{time.time_ns()}-{suffix}"

    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise LinguistError(f"임시 디렉토리 생성 실패: {e}") from e
    logger.info("임시 디렉토리 생성 path=%s", path)

    try:
        yield path
    finally:
        _cleanup(path)


class LinguistClassifier(BaseLanguageClassifier):
    """github-linguist CLI 분류기"""

    def __init__(
        self,
        command: str = "github-linguist",
        timeout: float = 300.0,
        root: Path | None = None,
    ):
        self.command = command
        self.timeout = timeout
        self.root = root

    async def _run(self, args: list[str], cwd: Path) -> str:
        """명령 실행 후 stdout 반환, 실패 시 LinguistError"""
        logger.debug("run > %s", " ".join(args))
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise LinguistError(f"명령 실행 불가 {args[0]}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise LinguistError(f"명령 시간 초과 ({self.timeout}s): {' '.join(args)}") from e

        if stderr:
            logger.debug("stderr: %s", stderr.decode(errors="replace").strip())
        if proc.returncode != 0:
            raise LinguistError(
                f"명령 실패 (exit {proc.returncode}): {' '.join(args)}: "
                f"{stderr.decode(errors='replace').strip()}"
            )
        return stdout.decode(errors="replace")

    async def _prepare_repo(self, workdir: Path, blobs: dict[str, str]) -> None:
        """파일을 쓰고 단일 커밋 스냅샷 생성"""
        await self._run(["git", "init", "--quiet"], workdir)
        await self._run(["git", "checkout", "--quiet", "--orphan", "temp"], workdir)

        for name, text in blobs.items():
            (workdir / name).write_text(text, encoding="utf-8", errors="replace")
        (workdir / ".gitattributes").write_text(GITATTRIBUTES, encoding="utf-8")

        await self._run(["git", "config", "user.name", DUMMY_USER_NAME], workdir)
        await self._run(["git", "config", "user.email", DUMMY_USER_EMAIL], workdir)
        await self._run(["git", "add", "."], workdir)
        await self._run(
            ["git", "-c", "commit.gpgsign=false", "commit", "--quiet", "--no-verify", "-m", "dummy"],
            workdir,
        )

    @staticmethod
    def _parse_output(stdout: str) -> dict[str, LinguistEntry]:
        """linguist JSON 출력 파싱"""
        try:
            data = json.loads(stdout)
            if not isinstance(data, dict):
                raise ValueError(f"예상하지 못한 출력 형식: {type(data).__name__}")
            return {name: LinguistEntry.model_validate(entry) for name, entry in data.items()}
        except (ValueError, ValidationError) as e:
            raise LinguistError(
                f"linguist 출력 파싱 실패: {e}", error_code=ErrorCode.LINGUIST_PARSE_ERROR
            ) from e

    async def analyze(self, blobs: dict[str, str]) -> dict[str, LinguistEntry]:
        async with staging_workspace(self.root) as workdir:
            if not blobs:
                logger.info("분석할 파일 없음, linguist 실행 생략")
                return {}

            await self._prepare_repo(workdir, blobs)
            stdout = await self._run([self.command, "--breakdown", "--json"], workdir)
            result = self._parse_output(stdout)

        logger.info("linguist 분석 완료 files=%d languages=%d", len(blobs), len(result))
        return result
