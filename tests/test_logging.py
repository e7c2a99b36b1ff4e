"""로깅 설정 테스트"""

from unittest.mock import patch

import pytest

from langbox.core.context import clear_context, set_run_id
from langbox.core.logging import (
    _mask_sensitive_data,
    add_context_processor,
    mask_sensitive_processor,
)


class TestMaskSensitiveData:
    """_mask_sensitive_data 함수 테스트"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Authorization: Bearer abc.def", "Authorization: Bearer ***"),
            ("token ghp_A1b2C3d4 leaked", "token ghp_*** leaked"),
            ("github_pat_11AAB_xyz", "github_pat_***"),
            ("no secrets here", "no secrets here"),
        ],
    )
    def test_masks_tokens(self, value, expected):
        assert _mask_sensitive_data(value) == expected


class TestProcessors:
    """structlog 프로세서 테스트"""

    def test_injects_run_id(self):
        set_run_id("run12345")
        try:
            event = add_context_processor(None, "info", {"event": "x"})
        finally:
            clear_context()

        assert event["run_id"] == "run12345"

    def test_no_run_id(self):
        assert "run_id" not in add_context_processor(None, "info", {"event": "x"})

    def test_masks_only_in_production(self):
        event = {"event": "Bearer secret"}

        with patch("langbox.core.logging.settings") as mock_settings:
            mock_settings.is_production = False
            assert mask_sensitive_processor(None, "info", dict(event)) == event

            mock_settings.is_production = True
            assert mask_sensitive_processor(None, "info", dict(event)) == {"event": "Bearer ***"}
