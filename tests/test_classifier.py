"""언어 분류 집계 테스트"""

from unittest.mock import patch

import pytest

from langbox.core.exceptions import ErrorCode, LinguistError
from langbox.domain.langstats.classifier import classify_files, staged_name
from langbox.domain.langstats.collector import extract_files
from langbox.domain.langstats.schemas import FileChange


class TestStagedName:
    """staged_name 함수 테스트"""

    @pytest.mark.parametrize(
        "index,path,expected",
        [
            (0, "src/a.py", "0.py"),
            (12, "cmd/server/main.go", "12.go"),
            (3, "Makefile", "3"),
            (4, "../../etc/passwd.sh", "4.sh"),
            (5, "lib/archive.tar.gz", "5.gz"),
        ],
    )
    def test_uses_index_and_extension(self, index, path, expected):
        """원본 경로 대신 순번과 확장자 사용"""
        assert staged_name(index, path) == expected


class TestClassifyFiles:
    """classify_files 함수 테스트"""

    @pytest.mark.asyncio
    async def test_aggregates_by_language(self, sample_commits, sample_classifier):
        """언어별 추가/삭제 합산과 파일 수"""
        files = extract_files(sample_commits)

        stats = await classify_files(files, sample_classifier)

        assert [s.name for s in stats] == ["Python", "Go"]
        python, go = stats
        assert (python.additions, python.deletions, python.file_count) == (5, 1, 1)
        assert (go.additions, go.deletions, go.file_count) == (3, 0, 1)
        assert python.percent == 62.5

    @pytest.mark.asyncio
    async def test_passes_reconstructed_blobs(self, sample_commits, sample_classifier):
        """복원된 텍스트를 순번 파일 이름으로 전달"""
        await classify_files(extract_files(sample_commits), sample_classifier)

        assert sample_classifier.calls == [{"0.py": "import os\nimport sys", "1.go": "\n\n\n"}]

    @pytest.mark.asyncio
    async def test_sorted_by_percent_descending(self, make_classifier):
        classifier = make_classifier(
            {
                "Shell": {"percentage": "5.00", "files": ["2.sh"]},
                "Rust": {"percentage": "70.00", "files": ["0.rs"]},
                "C": {"percentage": "25.00", "files": ["1.c"]},
            }
        )
        files = [FileChange(path=p, additions=1, changes=1) for p in ("a.rs", "b.c", "c.sh")]

        stats = await classify_files(files, classifier)

        assert [s.name for s in stats] == ["Rust", "C", "Shell"]

    @pytest.mark.asyncio
    async def test_multiple_files_per_language(self, make_classifier):
        classifier = make_classifier({"Python": {"percentage": "100.00", "files": ["0.py", "2.py"]}})
        files = [
            FileChange(path="a.py", additions=2, deletions=1, changes=3),
            FileChange(path="README", additions=100, deletions=0, changes=100),
            FileChange(path="b.py", additions=4, deletions=4, changes=8),
        ]

        stats = await classify_files(files, classifier)

        assert len(stats) == 1
        assert (stats[0].additions, stats[0].deletions, stats[0].file_count) == (6, 5, 2)

    @pytest.mark.asyncio
    async def test_unknown_file_contributes_zero(self, make_classifier):
        """매핑되지 않는 파일은 줄 수 0으로 계산"""
        classifier = make_classifier({"Go": {"percentage": "100.00", "files": ["0.go", "9.go"]}})
        files = [FileChange(path="a.go", additions=7, deletions=2, changes=9)]

        stats = await classify_files(files, classifier)

        assert (stats[0].additions, stats[0].deletions, stats[0].file_count) == (7, 2, 2)

    @pytest.mark.asyncio
    async def test_empty_files(self, make_classifier):
        classifier = make_classifier()

        stats = await classify_files([], classifier)

        assert stats == []
        assert classifier.calls == [{}]

    @pytest.mark.asyncio
    async def test_invalid_percentage_raises(self, make_classifier):
        classifier = make_classifier({"Go": {"percentage": "n/a", "files": []}})

        with pytest.raises(LinguistError) as exc_info:
            await classify_files([], classifier)

        assert exc_info.value.error_code == ErrorCode.LINGUIST_PARSE_ERROR

    @pytest.mark.asyncio
    async def test_uses_default_classifier(self, sample_classifier):
        with patch(
            "langbox.domain.langstats.classifier.get_classifier", return_value=sample_classifier
        ):
            await classify_files([FileChange(path="a.py", changes=1)])

        assert sample_classifier.calls == [{"0.py": "\n"}]
