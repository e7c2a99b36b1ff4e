from langbox.domain.langstats.schemas import FileChange

DIFF_MARKERS = ("+", "-")


def reconstruct_text(file: FileChange) -> str:
    """patch로부터 언어 감지용 텍스트 복원.

    추가/삭제 줄만 남기고 앞의 +/- 기호를 제거한다. GitHub이 큰 diff의
    patch를 생략한 경우 변경 줄 수만큼 개행 문자로 채운다 (정확하지 않음).

    Args:
        file: 변경 파일

    Returns:
        복원된 텍스트, 정보가 없으면 빈 문자열
    """
    if file.patch:
        return "\n".join(
            line[1:] for line in file.patch.split("\n") if line.startswith(DIFF_MARKERS)
        )
    if file.changes > 0:
        return "\n" * file.changes
    return ""
