"""Gist 본문 생성용 텍스트 포맷터"""

import math

from langbox.domain.langstats.schemas import LanguageStat

NAME_WIDTH = 10
COUNT_WIDTH = 7
BAR_WIDTH = 21
PERCENT_WIDTH = 5

ELLIPSIS = "…"

# 빈 칸부터 가득 찬 칸까지 1/8 단위
BAR_SYMBOLS = "░▏▎▍▌▋▊▉█"

UNITS = [
    ("E", 10**18),
    ("P", 10**15),
    ("T", 10**12),
    ("G", 10**9),
    ("M", 10**6),
    ("k", 10**3),
]


def trim_right(text: str, length: int) -> str:
    """최대 길이를 넘으면 말줄임표로 자르기"""
    if len(text) > length:
        return text[: length - 1] + ELLIPSIS
    return text


def format_number(n: int) -> str:
    """큰 수를 단위 접미사로 축약 - 1500 -> 1.5k"""
    for unit, value in UNITS:
        top = n / value
        if top >= 1:
            return f"{top:.1f}{unit}"
    return str(n)


def render_bar(percent: float, size: int) -> str:
    """퍼센트를 1/8 칸 해상도의 유니코드 막대로 변환

    Args:
        percent: 0~100 사이 퍼센트
        size: 막대 너비 (문자 수)

    Returns:
        정확히 size 길이의 막대 문자열
    """
    full = BAR_SYMBOLS[8]
    empty = BAR_SYMBOLS[0]

    eighths = math.floor(size * 8 * percent / 100)
    full_cells = eighths // 8

    if full_cells >= size:
        return full * size

    partial = BAR_SYMBOLS[eighths % 8]
    return (full * full_cells + partial).ljust(size, empty)


def format_line(stat: LanguageStat) -> str:
    """언어 한 줄 포맷"""
    name = trim_right(stat.name, NAME_WIDTH).ljust(NAME_WIDTH)
    counts = (
        f"+{format_number(stat.additions)}".rjust(COUNT_WIDTH)
        + "/"
        + f"-{format_number(stat.deletions)}".rjust(COUNT_WIDTH)
    )
    bar = render_bar(stat.percent, BAR_WIDTH)
    percent = f"{stat.percent:.1f}".rjust(PERCENT_WIDTH)
    return " ".join([name, counts, bar]) + percent + "%"


def create_content(stats: list[LanguageStat]) -> str:
    """언어 통계 목록으로 Gist 본문 생성, 입력 순서 유지"""
    return "\n".join(format_line(stat) for stat in stats)
