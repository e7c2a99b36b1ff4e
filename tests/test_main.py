"""langbox/main.py 테스트"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from langbox.core.context import get_run_id
from langbox.core.exceptions import LinguistError
from langbox.main import main

MAIN = "langbox.main"


@pytest.fixture
def mock_runtime():
    """로깅 설정과 클라이언트 종료 mock"""
    with (
        patch(f"{MAIN}.setup_logging"),
        patch(f"{MAIN}.close_github_client", AsyncMock()) as mock_close,
    ):
        yield mock_close


@pytest.fixture
def valid_settings():
    with patch(f"{MAIN}.settings") as mock_settings:
        mock_settings.validate_required = MagicMock(return_value=[])
        yield mock_settings


class TestMain:
    """main 함수 테스트"""

    @pytest.mark.asyncio
    async def test_success(self, mock_runtime, valid_settings):
        with patch(f"{MAIN}.update_language_gist", AsyncMock(return_value="report")) as mock_update:
            code = await main()

        assert code == 0
        mock_update.assert_awaited_once_with(valid_settings)
        mock_runtime.assert_awaited_once()
        assert get_run_id() is None

    @pytest.mark.asyncio
    async def test_nothing_to_publish(self, mock_runtime, valid_settings):
        with patch(f"{MAIN}.update_language_gist", AsyncMock(return_value=None)):
            assert await main() == 0

    @pytest.mark.asyncio
    async def test_missing_configuration(self, mock_runtime):
        """필수 설정 누락 시 네트워크 호출 없이 종료"""
        with (
            patch(f"{MAIN}.settings") as mock_settings,
            patch(f"{MAIN}.update_language_gist", AsyncMock()) as mock_update,
        ):
            mock_settings.validate_required = MagicMock(return_value=["GH_TOKEN", "GIST_ID"])
            code = await main()

        assert code == 2
        mock_update.assert_not_awaited()
        mock_runtime.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_linguist_error(self, mock_runtime, valid_settings):
        with patch(f"{MAIN}.update_language_gist", AsyncMock(side_effect=LinguistError("boom"))):
            assert await main() == 1

    @pytest.mark.asyncio
    async def test_unexpected_error(self, mock_runtime, valid_settings):
        with patch(f"{MAIN}.update_language_gist", AsyncMock(side_effect=RuntimeError("boom"))):
            assert await main() == 1
        mock_runtime.assert_awaited_once()
